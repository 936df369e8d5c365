import html
import re
from typing import List, Optional

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')

def escape(value: str) -> str:
    """HTML-escape a string field before it is stored.

    '/' is left alone so image URLs keep working.
    """
    return html.escape(value, quote=True)

def not_blank(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field} must not be empty")
    return value

def check_game_type(value: str) -> str:
    """Rule shared by create and the by-type lookup, applied to the raw value"""
    not_blank(value, 'type')
    if _CONTROL_CHARS.search(value):
        raise ValueError("type must not contain control characters")
    return value

def not_bool(value, field: str):
    # bool is an int subclass and lax mode would take true as 1
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    return value

def duplicate_ids(ids: List[str]) -> List[str]:
    seen = set()
    duplicates = []
    for qid in ids:
        if qid in seen and qid not in duplicates:
            duplicates.append(qid)
        seen.add(qid)
    return duplicates

def check_unique_question_ids(questions: Optional[list]) -> None:
    if not questions:
        return
    duplicates = duplicate_ids([q.questionID for q in questions])
    if duplicates:
        raise ValueError(f"questionID values must be unique, duplicated: {', '.join(duplicates)}")
