# universe/faq.py
from __future__ import annotations
from textwrap import dedent
from typing import Dict, List

CATEGORIES = ["general", "power", "operation", "cleaning", "connectivity", "troubleshooting"]

FAQ: List[Dict] = [
    {"category": "general", "question": "Which robot models are in the fleet?",
     "answer": "The fleet runs Servi (3 trays, 27 kg), Servi Plus (4+1 trays, 36 kg), Servi Lift (height-adjustable, 18 kg) and Servi Suite (secure compartments for hotel delivery).",
     "keywords": ["model", "models", "servi", "capacity", "payload"]},
    {"category": "general", "question": "What uptime should a facility expect?",
     "answer": "The operating target is 95%+ availability per shift. Sustained uptime below 85% raises a high-severity alert and below 70% pages field engineering.",
     "keywords": ["uptime", "availability", "target", "sla"]},
    {"category": "power", "question": "How long does a full charge last?",
     "answer": "A full battery gives 8-12 hours of runtime depending on payload and floor density. Robots auto-dock when the charge drops below the configured threshold.",
     "keywords": ["battery", "runtime", "charge", "hours"]},
    {"category": "power", "question": "The robot is docked but not charging. What should I check?",
     "answer": "Clean the charging contacts on the robot and the dock with isopropyl alcohol, confirm the dock has power (solid LED), then re-seat the robot. A flashing 3-2 red pattern means the charging handshake failed; update the charging firmware from the fleet console.",
     "keywords": ["charging", "dock", "docking", "contacts", "led"]},
    {"category": "power", "question": "How do I extend battery health?",
     "answer": "Avoid deep discharges, keep docks in ventilated areas and let the fleet console schedule cell balancing weekly.",
     "keywords": ["battery", "health", "degradation", "charging"]},
    {"category": "operation", "question": "How do I send a robot to a table?",
     "answer": "Load the trays, pick the table on the touchscreen and press Go. Multi-table runs are queued in the order selected.",
     "keywords": ["table", "delivery", "send", "mission"]},
    {"category": "operation", "question": "Can robots ride elevators?",
     "answer": "Servi Lift and Servi Plus integrate with supported elevator controllers for multi-floor missions once the site map marks elevator waypoints.",
     "keywords": ["elevator", "floor", "multi-floor", "lift"]},
    {"category": "cleaning", "question": "How should trays be cleaned?",
     "answer": "Wipe trays daily with a mild detergent; never spray liquid directly onto the sensors or the touchscreen.",
     "keywords": ["clean", "cleaning", "tray", "trays", "sanitize"]},
    {"category": "cleaning", "question": "How do I clean the LiDAR and cameras?",
     "answer": "Use a dry microfiber cloth on the LiDAR window and camera lenses weekly; smudges cause navigation drift.",
     "keywords": ["lidar", "camera", "sensor", "lens"]},
    {"category": "connectivity", "question": "The robot keeps dropping off WiFi.",
     "answer": "Check 5GHz coverage along the route, move repeaters away from kitchen equipment and pin the robot to a non-congested channel.",
     "keywords": ["wifi", "network", "disconnect", "dropout", "signal"]},
    {"category": "troubleshooting", "question": "The robot drifts off its path.",
     "answer": "Run LiDAR recalibration from the diagnostic panel and verify heading accuracy is within ±1°. Re-map the area if furniture moved.",
     "keywords": ["drift", "navigation", "path", "calibration", "lost"]},
    {"category": "troubleshooting", "question": "A tray sensor reports the wrong weight.",
     "answer": "Empty the trays and run weight-sensor recalibration from settings; replace the sensor if readings stay off by more than 200 g.",
     "keywords": ["tray", "weight", "sensor", "payload"]},
]

FLEET_KNOWLEDGE = dedent("""
    # Fleet overview
    - Service robots for restaurants, hotels, hospitals and stadiums.
    - Models: Servi, Servi Plus, Servi Lift, Servi Suite; Carti carts for back-of-house.
    - Navigation: 360° LiDAR, six RGB cameras, SLAM with ±2 cm localization.

    # Operating targets
    - Uptime 95%+, incidents under 2 per 1k jobs, NPS 70+.
    - Orders per shift 50-150 per robot; trip time 45-180 s.

    # Maintenance
    - Daily: battery check, tray cleaning. Weekly: sensor calibration, firmware.
    - Monthly: deep cleaning, mechanical inspection. Quarterly: LiDAR recalibration, safety audit.

    # Escalation levels
    - Low: log and monitor. Medium: schedule maintenance.
    - High: service disruption, dispatch a field engineer within 6 hours.
    - Critical: safety concern, immediate shutdown and dispatch.
""").strip()
