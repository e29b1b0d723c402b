DEBUG = False

CURRENT_VERSION = "0.3.0"
