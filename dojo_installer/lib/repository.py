from __future__ import annotations

import logging
import os
import shutil

from ..context import InstallContext
from ..errors import AmbiguousSourceSelector, RepositoryCheckoutError, RepositoryCloneError
from .command import run_cmd

logger = logging.getLogger(__name__)


def branch_ref(branch: str) -> str:
    return f"refs/heads/{branch}"


def _git() -> str:
    git_bin = shutil.which("git")
    if git_bin is None:
        raise RepositoryCloneError("git not found on PATH; required for a source install")
    return git_bin


def clone_commit(git_bin: str, url: str, dest: str, commit: str, *, dry_run: bool = False) -> None:
    """Full clone, then point the working tree at one commit."""

    r = run_cmd([git_bin, "clone", url, dest], dry_run=dry_run)
    if r.returncode != 0:
        raise RepositoryCloneError(f"Cloning {url} failed: {r.output.strip()}")

    # No rollback: a failed checkout leaves the fresh clone in place.
    r = run_cmd([git_bin, "-C", dest, "checkout", commit], dry_run=dry_run)
    if r.returncode != 0:
        raise RepositoryCheckoutError(f"Checking out commit {commit} failed: {r.output.strip()}")


def clone_branch(git_bin: str, url: str, dest: str, branch: str, *, dry_run: bool = False) -> None:
    """Single-branch clone; the branch tip is checked out by the clone itself.

    `git clone --branch` also accepts a tag of the same name, so the remote
    is asked for refs/heads/<branch> first and a missing branch fails here.
    """

    ref = branch_ref(branch)
    r = run_cmd([git_bin, "ls-remote", "--exit-code", "--heads", url, ref], dry_run=dry_run)
    if r.returncode != 0:
        raise RepositoryCloneError(f"Branch {ref} not found at {url}: {r.output.strip()}")

    r = run_cmd([git_bin, "clone", "--single-branch", "--branch", branch, url, dest], dry_run=dry_run)
    if r.returncode != 0:
        raise RepositoryCloneError(f"Cloning {ref} from {url} failed: {r.output.strip()}")


def get_source(ctx: InstallContext) -> None:
    """Clone the configured repo at a commit (preferred) or branch tip."""

    cfg = ctx.config
    commit = cfg.source_commit.strip()
    branch = cfg.source_branch.strip()

    # Checked before touching disk or network.
    if not commit and not branch:
        err = AmbiguousSourceSelector(cfg.source_commit, cfg.source_branch)
        ctx.trace.debug("Error checking out Dojo source was: %s", err)
        raise err

    ctx.spinner.status("Downloading DefectDojo source as a branch or commit from the repo directly")
    git_bin = _git()

    src_path = cfg.source_path
    ctx.trace.debug("Creating source directory %s if it doesn't exist already", src_path)
    os.makedirs(src_path, 0o755, exist_ok=True)

    if commit:
        ctx.spinner.status(f"Dojo will be installed from commit {commit}")
        ctx.trace.debug("Initial clone of %s", cfg.clone_url)
        with ctx.spinner.running("Downloading DefectDojo source..."):
            clone_commit(git_bin, cfg.clone_url, src_path, commit, dry_run=cfg.dry_run)
    else:
        ctx.spinner.status(f"DefectDojo will be installed from {branch} branch")
        ctx.trace.debug("Checking out %s", branch_ref(branch))
        with ctx.spinner.running("Downloading DefectDojo source..."):
            clone_branch(git_bin, cfg.clone_url, src_path, branch, dry_run=cfg.dry_run)

    ctx.spinner.status("Successfully checked out the configured DefectDojo source")
