from __future__ import annotations

import logging
import os
from time import monotonic
from typing import Optional

import httpx

from ..context import InstallContext
from ..errors import ReleaseDownloadError, ReleaseExtractError
from .tarball import extract_tarball

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_SECONDS = 120.0
CHUNK_SIZE = 64 * 1024


def build_download_client() -> httpx.Client:
    return httpx.Client(
        timeout=httpx.Timeout(DOWNLOAD_TIMEOUT_SECONDS),
        follow_redirects=True,
        headers={"User-Agent": "dojo-installer"},
    )


def download_release(client: httpx.Client, url: str, dest: str, *, trace: logging.Logger) -> int:
    """Stream url into dest; returns bytes written.

    The whole exchange, body included, must finish within
    DOWNLOAD_TIMEOUT_SECONDS. Any failure (interrupts included) removes the
    partial file so a re-run does not resume from a truncated archive.
    """

    written = 0
    done = False
    deadline = monotonic() + DOWNLOAD_TIMEOUT_SECONDS
    try:
        with client.stream("GET", url) as resp:
            if resp.status_code >= 400:
                raise ReleaseDownloadError(f"Downloading {url} failed with HTTP {resp.status_code}")
            with open(dest, "wb") as fh:
                for chunk in resp.iter_bytes(CHUNK_SIZE):
                    if monotonic() > deadline:
                        raise ReleaseDownloadError(
                            f"Downloading {url} exceeded {DOWNLOAD_TIMEOUT_SECONDS:g}s"
                        )
                    fh.write(chunk)
                    written += len(chunk)
        done = True
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        trace.debug("Error downloading release was: %r", e)
        raise ReleaseDownloadError(f"Downloading {url} failed: {e}") from e
    finally:
        if not done:
            _discard(dest)

    trace.debug("Wrote %d bytes to %s", written, dest)
    return written


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def extract_release(ctx: InstallContext, tarball: str) -> None:
    cfg = ctx.config
    ctx.trace.debug("Extracting tarball into the Dojo source directory")
    extract_tarball(tarball, cfg.install_root)

    old_path = os.path.join(cfg.install_root, cfg.extracted_dir_name)
    new_path = cfg.source_path
    ctx.trace.debug("Renaming %s to %s", old_path, new_path)
    try:
        os.rename(old_path, new_path)
    except OSError as e:
        ctx.trace.debug("Error renaming Dojo source directory was: %r", e)
        raise ReleaseExtractError(f"Unable to rename {old_path} to {new_path}: {e}") from e


def get_release(ctx: InstallContext, *, client: Optional[httpx.Client] = None) -> None:
    """Download (unless already present) and extract the configured release."""

    cfg = ctx.config
    ctx.spinner.status(f"Downloading the configured release of DefectDojo => version {cfg.release_version}")

    ctx.trace.debug("Creating the Dojo root directory if it doesn't exist already")
    os.makedirs(cfg.install_root, 0o755, exist_ok=True)

    url = cfg.release_url
    tarball = cfg.tarball_path
    ctx.trace.debug("Release download URL is %s", url)
    ctx.trace.debug("File path to write tarball is %s", tarball)

    if os.path.isfile(tarball):
        logger.info("Tarball %s already present, skipping download", tarball)
        if os.path.isdir(cfg.source_path):
            ctx.spinner.status(f"Release already extracted at {cfg.source_path}, nothing to do")
            return
        with ctx.spinner.running("Extracting release..."):
            extract_release(ctx, tarball)
        ctx.spinner.status("Tarball already downloaded, extracted the DefectDojo release file")
        return

    if cfg.dry_run:
        logger.info("DRY-RUN would download %s to %s", url, tarball)
        return

    owns_client = client is None
    client = client or build_download_client()
    ctx.trace.debug("httpx timeout set to %s seconds for release download", DOWNLOAD_TIMEOUT_SECONDS)
    try:
        with ctx.spinner.running("Downloading release..."):
            download_release(client, url, tarball, trace=ctx.trace)
            extract_release(ctx, tarball)
    finally:
        if owns_client:
            client.close()

    ctx.spinner.status("Successfully downloaded and extracted the DefectDojo release file")
