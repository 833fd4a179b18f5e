SECRET_KEY = "test-secret"

SHIFTS_FILE = None

SHIFT_TIMES = [
    {"start": "00:00", "end": "08:00", "name": "Night"},
    {"start": "08:00", "end": "16:00", "name": "Day"},
    {"start": "16:00", "end": "00:00", "name": "Evening"},
]

DEBUG = False
TESTING = True
