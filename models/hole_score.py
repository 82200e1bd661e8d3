import json
import logging
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

HOLE_NUMBER_KEYS = ("hole_number", "holeNumber", "hole")
STROKE_KEYS = ("strokes", "score")
STROKE_INDEX_KEYS = ("stroke_index", "handicap")


class HoleScore(BaseModel):
    """A player's score on a single hole, with the par it was played to."""
    model_config = ConfigDict(frozen=True)

    hole_number: Optional[int] = Field(None, ge=0)
    par: int = Field(..., ge=1)
    strokes: int = Field(..., ge=1)
    stroke_index: Optional[int] = Field(None, ge=1)  # hole handicap, 1 = hardest

    def to_par(self) -> int:
        """Calculate score relative to par (+2, -1, etc.)."""
        return self.strokes - self.par


class HoleScoreStatus(str, Enum):
    MISSING = "missing"
    VALID = "valid"
    MALFORMED = "malformed"


class HoleScoreSet(BaseModel):
    """
    Normalized hole-by-hole detail for a round.

    `status` tells "nothing recorded" (missing) apart from "recorded but
    unreadable" (malformed). `skipped` counts individual entries dropped from
    an otherwise readable payload.
    """
    model_config = ConfigDict(frozen=True)

    status: HoleScoreStatus = HoleScoreStatus.MISSING
    holes: List[HoleScore] = Field(default_factory=list)
    skipped: int = 0

    @property
    def entry_count(self) -> int:
        """Number of entries present in the source payload."""
        return len(self.holes) + self.skipped


def _first_present(data: Dict[str, Any], keys) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def hole_score_from_entry(entry: Any, hole_number: Any = None) -> Optional[HoleScore]:
    """Convert one stored entry into a HoleScore, or None when it is unusable."""
    if isinstance(entry, HoleScore):
        return entry
    if not isinstance(entry, dict):
        return None

    par = _as_int(entry.get("par"))
    strokes = _as_int(_first_present(entry, STROKE_KEYS))
    if par is None or strokes is None:
        return None

    number = _as_int(_first_present(entry, HOLE_NUMBER_KEYS))
    if number is None:
        number = _as_int(hole_number)

    stroke_index = _as_int(_first_present(entry, STROKE_INDEX_KEYS))
    if stroke_index is not None and stroke_index < 1:
        stroke_index = None

    try:
        return HoleScore(hole_number=number, par=par, strokes=strokes, stroke_index=stroke_index)
    except ValidationError:
        return None


def parse_hole_scores(raw: Any) -> HoleScoreSet:
    """
    Normalize stored hole scores into a HoleScoreSet.

    Accepts None, a list of entries, a map keyed by hole number, or a JSON
    string encoding either. Unusable entries are counted in `skipped`.
    """
    if isinstance(raw, HoleScoreSet):
        return raw
    if raw is None:
        return HoleScoreSet(status=HoleScoreStatus.MISSING)

    if isinstance(raw, (str, bytes)):
        if not raw.strip():
            return HoleScoreSet(status=HoleScoreStatus.MISSING)
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.debug("Unreadable hole_scores payload: %r", raw[:80])
            return HoleScoreSet(status=HoleScoreStatus.MALFORMED)
        if raw is None:
            return HoleScoreSet(status=HoleScoreStatus.MISSING)

    if isinstance(raw, dict) and "status" in raw and "holes" in raw:
        # Already-normalized payload coming back through the API.
        return HoleScoreSet.model_validate(raw)

    if isinstance(raw, dict):
        pairs = list(raw.items())
    elif isinstance(raw, (list, tuple)):
        pairs = [(None, entry) for entry in raw]
    else:
        logger.debug("hole_scores is neither a list nor a map: %r", type(raw))
        return HoleScoreSet(status=HoleScoreStatus.MALFORMED)

    holes: List[HoleScore] = []
    skipped = 0
    for key, entry in pairs:
        score = hole_score_from_entry(entry, hole_number=key)
        if score is None:
            skipped += 1
            continue
        holes.append(score)

    if skipped:
        logger.debug("Skipped %d unusable hole score entries", skipped)
    return HoleScoreSet(status=HoleScoreStatus.VALID, holes=holes, skipped=skipped)
