import os
class Settings:
    def __init__(self):
        self.OPENAI_API_KEY=os.getenv('OPENAI_API_KEY','')
        self.OPENAI_MODEL=os.getenv('OPENAI_MODEL','gpt-4.1-mini')
        self.OPENAI_BASE_URL=os.getenv('OPENAI_BASE_URL','https://api.openai.com/v1')
        self.LLM_TIMEOUT_SEC=float(os.getenv('LLM_TIMEOUT_SEC','20'))
        self.UNIVERSE_RECORDS_CSV=os.getenv('UNIVERSE_RECORDS_CSV','')
        self.LOG_LEVEL=os.getenv('LOG_LEVEL','INFO').upper()
        self.CORS_ORIGINS=[o.strip() for o in os.getenv('CORS_ORIGINS','*').split(',') if o.strip()]
settings=Settings()
