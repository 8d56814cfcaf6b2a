from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pyflap.infra.exceptions import HighScoreDecodeError, HighScoreEncodeError, HighScoreSaveError
from pyflap.infra.high_score_codec import decode_high_score, encode_high_score

logger = logging.getLogger(__name__)


class JsonHighScoreStore:
    """
    Keeps the best score in a small JSON file.
    Anything unreadable is reported once as a warning and treated as "nothing stored".
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get_high_score(self) -> int | None:
        if not self._path.exists():
            return None
        try:
            return self.load()
        except HighScoreDecodeError as e:
            logger.warning("Ignoring stored high score: %s", e)
            return None

    def load(self) -> int:
        try:
            data = self._path.read_text(encoding="utf-8")
            return decode_high_score(json.loads(data))
        except HighScoreDecodeError:
            raise
        except Exception as e:
            raise HighScoreDecodeError(f"Failed to load high score from {self._path}: {e}") from e

    def set_high_score(self, score: int) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = encode_high_score(score)
            text = json.dumps(payload, indent=2, sort_keys=True)
            self._path.parent.mkdir(parents=True, exist_ok=True)

            # Atomic-ish write: write temp then replace.
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self._path)
        except (HighScoreEncodeError, OSError) as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            raise HighScoreSaveError(f"Failed to save high score to {self._path}: {e}") from e
        logger.debug("High score %d written to %s", score, self._path)
