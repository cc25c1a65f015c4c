class BaseAdapter:
    def __init__(self, url:str='', api_key:str='', timeout:float=20.0):
        self.url=url.rstrip('/'); self.api_key=api_key; self.timeout=timeout
