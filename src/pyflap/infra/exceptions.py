class HighScoreDecodeError(Exception):
    """Stored high score data is unreadable or malformed."""


class HighScoreEncodeError(Exception):
    """A value that is not a valid high score was handed to the codec."""


class HighScoreSaveError(Exception):
    """Writing the high score to disk failed."""
