# src/llm_review/review/diff.py
from unidiff import PatchSet
from llm_review.models.diff import FileChange, Hunk


def parse_file_changes(diff_text: str) -> list[FileChange]:
    """Parse unified diff into FileChange objects (deleted files are skipped)."""
    patch = PatchSet(diff_text)
    files = []

    for patched_file in patch:
        if patched_file.is_removed_file:
            continue

        hunks = [
            Hunk(
                # Pure deletions at the top of a file report +0,0
                new_start=max(hunk.target_start, 1),
                new_lines=hunk.target_length,
                content=str(hunk),
            )
            for hunk in patched_file
        ]
        files.append(FileChange(filename=patched_file.path, hunks=hunks))

    return files
