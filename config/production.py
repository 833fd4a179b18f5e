import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHIFTS_FILE = os.getenv("SHIFTS_FILE", ".shifts.json")

DEBUG = False
