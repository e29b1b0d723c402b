SEPARATOR_LINE_LENGTH = 60

DEFAULT_FRAME_DELAY = 1
