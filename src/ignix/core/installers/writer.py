"""No-clobber file writes."""

from pathlib import Path

from ignix.core.user_feedback import UserFeedback


def write_if_absent(path: Path, content: str, feedback: UserFeedback) -> bool:
    """Write content to path unless a file is already there.

    This is the only write primitive the installers use. The filesystem is the
    source of truth for "already installed": an existing file is never
    overwritten, so re-running an install keeps local edits.

    Returns:
        True if the file was written, False if it already existed
    """
    if path.exists():
        feedback.warning(f"File already exists, skipping: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="")
    feedback.info(f"Created: {path}")
    return True
