import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON file with {"shift_times": [...]}; when unset, SHIFT_TIMES below is used
SHIFTS_FILE = os.getenv("SHIFTS_FILE") or None

# Sorted by start time, covering the whole day (UTC)
SHIFT_TIMES = [
    {"start": "00:00", "end": "08:00", "name": "Night"},
    {"start": "08:00", "end": "16:00", "name": "Day"},
    {"start": "16:00", "end": "00:00", "name": "Evening"},
]

DEBUG = True
