#!/usr/bin/env python3
"""Redeploy the task with fresh DataLink reports.

Designed to run from cron, for example daily at 2 AM UTC:

    0 2 * * * cd /path/to/project && rating-refresh-redeploy >> redeploy.log 2>&1
"""

import logging
import os
import subprocess
import sys
from datetime import datetime, timezone

from rating_refresh.commands import configure_logging

logger = logging.getLogger("rating_refresh.redeploy")

DEPLOY_MODULE = "rating_refresh.commands.deploy"


def redeploy(cwd: str = ".") -> subprocess.CompletedProcess:
    """
    Run the deploy command in a child interpreter so every run starts from a fresh environment.

    Raises:
        subprocess.CalledProcessError: If the deployment exits with a non-zero status
    """
    logger.info(f"[REDEPLOY] Starting automated redeployment at {datetime.now(timezone.utc).isoformat()}")
    logger.info(f"[REDEPLOY] Working directory: {os.path.abspath(cwd)}")
    logger.info("[REDEPLOY] Running deployment script...")

    try:
        result = subprocess.run(
            [sys.executable, "-m", DEPLOY_MODULE],
            cwd=cwd,
            env=os.environ.copy(),
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"[REDEPLOY] Redeployment failed with exit code {e.returncode}")
        if e.stdout:
            logger.error(f"[REDEPLOY] stdout: {e.stdout}")
        if e.stderr:
            logger.error(f"[REDEPLOY] stderr: {e.stderr}")
        raise

    logger.info("[REDEPLOY] Redeployment successful")
    if result.stdout:
        logger.info(result.stdout)
    # The child logs to stderr, so on success stderr is its deployment log
    if result.stderr:
        logger.info(f"[REDEPLOY] Deployment log:\n{result.stderr}")

    logger.info(f"[REDEPLOY] Completed at {datetime.now(timezone.utc).isoformat()}")
    return result


def run() -> None:
    configure_logging()
    try:
        redeploy()
    except Exception as e:
        logger.error(f"[FATAL] Redeployment script failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
