from __future__ import annotations

from typing import Any

from pyflap.infra.exceptions import HighScoreDecodeError, HighScoreEncodeError


_FORMAT = "pyflap.highscore"
_VERSION_LATEST = 1


def encode_high_score(score: int) -> dict:
    if isinstance(score, bool) or not isinstance(score, int):
        raise HighScoreEncodeError(f"High score must be an integer, got {type(score).__name__}.")
    if score < 0:
        raise HighScoreEncodeError("High score must be >= 0.")
    return {
        "format": _FORMAT,
        "version": _VERSION_LATEST,
        "high_score": score,
    }


def decode_high_score(obj: Any) -> int:
    try:
        # Version 0 stored the bare number, sometimes as a string.
        if isinstance(obj, (int, str)) and not isinstance(obj, bool):
            return _decode_v0(obj)

        if not isinstance(obj, dict):
            raise HighScoreDecodeError("High score data must be an object.")
        if obj.get("format") != _FORMAT:
            raise HighScoreDecodeError("Invalid high score format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise HighScoreDecodeError("Unsupported high score version.")
    except HighScoreDecodeError:
        raise
    except Exception as e:
        raise HighScoreDecodeError(f"Failed to decode high score: {e}") from e


def _decode_v1(obj: dict) -> int:
    score = obj.get("high_score")
    if isinstance(score, bool) or not isinstance(score, int):
        raise HighScoreDecodeError("high_score must be an integer.")
    if score < 0:
        raise HighScoreDecodeError("high_score must be >= 0.")
    return score


def _decode_v0(raw: int | str) -> int:
    if isinstance(raw, str):
        text = raw.strip()
        if not text.isdigit():
            raise HighScoreDecodeError(f"Not a number: {raw!r}")
        return int(text)
    if raw < 0:
        raise HighScoreDecodeError("high score must be >= 0.")
    return raw
