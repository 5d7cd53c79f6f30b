"""Change sets: directories touched between two revisions."""

from .git_diff import DEFAULT_TEST_PATTERNS, changed_directories, changed_files, directories_from_files, is_test_file

__all__ = [
    "DEFAULT_TEST_PATTERNS",
    "changed_directories",
    "changed_files",
    "directories_from_files",
    "is_test_file",
]
