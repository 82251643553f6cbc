"""Object names for shared payloads.

    note   -> note-<epoch ms>.md
    code   -> code-<epoch ms>.txt
    file   -> public/<stem>-<3 random digits>-<YYYY-MM-DD><suffix>
"""

import random
from datetime import datetime, UTC
from pathlib import PurePath


def _epoch_millis() -> int:
    return int(datetime.now(UTC).timestamp() * 1000)


def note_object_name() -> str:
    return f'note-{_epoch_millis()}.md'


def code_object_name() -> str:
    return f'code-{_epoch_millis()}.txt'


def file_object_name(filename: str) -> str:
    """Derive a collision-resistant object name from an uploaded file's name

    Example:
        >>> file_object_name('report.final.pdf')
        'public/report.final-417-2025-10-15.pdf'
    """
    name = PurePath(filename).name
    stem, suffix = PurePath(name).stem, PurePath(name).suffix
    random_digits = random.randint(100, 999)  # noqa: S311
    today = datetime.now(UTC).date().isoformat()
    return f'public/{stem}-{random_digits}-{today}{suffix}'
