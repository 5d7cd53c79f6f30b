"""Derive changed directories from `git diff`."""

import fnmatch
import posixpath
import subprocess
from typing import Iterable, List, Optional, Sequence, Set
from ..selection.paths import normalize_dir
from ..utils.errors import ChangeSetError
from ..utils.logging import get_logger

logger = get_logger("changes.git_diff")

GIT_COMMAND = "git"
DEFAULT_TEST_PATTERNS = ["*_test.go"]


def is_test_file(path: str, patterns: Sequence[str]) -> bool:
    """True when the file's basename matches a test-file pattern."""
    name = posixpath.basename(path)
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def directories_from_files(
    files: Iterable[str],
    include_tests: bool = False,
    test_patterns: Optional[Sequence[str]] = None
) -> Set[str]:
    """
    Collapse changed file paths into their parent directories.
    
    Files at the repository root have no directory and are dropped.
    
    Args:
        files: Root-relative file paths
        include_tests: Keep files that match a test pattern
        test_patterns: Basename globs identifying test files
        
    Returns:
        Set of normalized root-relative directories
    """
    patterns = list(DEFAULT_TEST_PATTERNS if test_patterns is None else test_patterns)
    directories = set()
    for file_path in files:
        file_path = file_path.strip()
        if not file_path:
            continue
        if not include_tests and is_test_file(file_path, patterns):
            continue
        directory = normalize_dir(posixpath.dirname(file_path.replace("\\", "/")))
        if directory:
            directories.add(directory)
    return directories


def changed_files(root: str, from_rev: str, to_rev: str, timeout: int = 120) -> List[str]:
    """
    List files that differ between two revisions, relative to root.
    
    Changes outside root are ignored. Renames are reported as a delete plus
    an add so both directories count, and NUL-separated output keeps
    non-ASCII paths unquoted.
    
    Raises:
        ChangeSetError: If git is missing, root is not a repository or a revision does not resolve
    """
    cmd = [
        GIT_COMMAND, "--no-pager", "-C", root, "diff",
        "--name-only", "--relative", "--no-renames", "-z",
        from_rev, to_rev,
    ]
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            timeout=timeout
        )
    except FileNotFoundError:
        raise ChangeSetError(f"{GIT_COMMAND} is missing")
    except subprocess.TimeoutExpired:
        raise ChangeSetError(f"git diff timed out after {timeout}s")
    
    if result.returncode != 0:
        raise ChangeSetError(
            f"git diff {from_rev} {to_rev} failed in {root}: {result.stderr.strip()}"
        )
    return [path for path in result.stdout.split("\0") if path.strip()]


def changed_directories(
    root: str,
    from_rev: str,
    to_rev: str,
    include_tests: bool = False,
    test_patterns: Optional[Sequence[str]] = None
) -> Set[str]:
    """Directories containing at least one file changed between from_rev and to_rev."""
    files = changed_files(root, from_rev, to_rev)
    directories = directories_from_files(files, include_tests, test_patterns)
    logger.info(f"{len(files)} changed files in {len(directories)} directories ({from_rev}..{to_rev})")
    return directories
