import os
import logging
from logging.handlers import TimedRotatingFileHandler
import gzip
import glob
import time
import re
from datetime import datetime
from collections import defaultdict

import click
from flask import current_app
from flask.cli import with_appcontext


LOG_FORMAT = "%(asctime)s [%(levelname)s] in %(module)s: %(message)s"
ACCESS_FORMAT = "%(asctime)s - %(message)s"


def _rotating_handler(path, level, formatter, backup_count):
    handler = TimedRotatingFileHandler(
        path, when="midnight", interval=1, backupCount=backup_count,
        encoding="utf-8", delay=True
    )
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def _reset_handlers(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# ==================================================
# LOGGING SETUP
# ==================================================
def setup_logging(app, settings):
    """Configure app, error and access logging for the catalog service."""
    # Prevent duplicate log handlers on repeat calls for the same app
    if getattr(app, "_logging_configured", False):
        return app.logger
    app._logging_configured = True

    formatter = logging.Formatter(LOG_FORMAT)
    app_logger = app.logger
    app_logger.setLevel(logging.INFO)

    access_logger = logging.getLogger("access")
    access_logger.setLevel(logging.INFO)

    # Both loggers are looked up by name and outlive a single factory call
    _reset_handlers(app_logger)
    _reset_handlers(access_logger)

    # -------------------------
    # FILE HANDLERS
    # -------------------------
    if settings.file_logging:
        os.makedirs(settings.log_dir, exist_ok=True)
        app_logger.addHandler(_rotating_handler(
            os.path.join(settings.log_dir, "app.log"), logging.INFO, formatter, 14))
        app_logger.addHandler(_rotating_handler(
            os.path.join(settings.log_dir, "error.log"), logging.ERROR, formatter, 30))
        access_logger.addHandler(_rotating_handler(
            os.path.join(settings.log_dir, "access.log"), logging.INFO,
            logging.Formatter(ACCESS_FORMAT), 7))

    # -------------------------
    # CONSOLE HANDLERS
    # -------------------------
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    app_logger.addHandler(console_handler)

    access_console = logging.StreamHandler()
    access_console.setFormatter(logging.Formatter(ACCESS_FORMAT))
    access_console.setLevel(logging.INFO)
    access_logger.addHandler(access_console)

    # -------------------------
    # LOG HOOKS & TASKS
    # -------------------------
    register_access_log_hook(app, access_logger)
    if settings.file_logging:
        cleanup_old_logs(app, settings.log_dir)
    app.cli.add_command(summarize_logs)

    app_logger.info("Logging initialized.")
    return app_logger


# ==================================================
# ACCESS LOGGING
# ==================================================
def register_access_log_hook(app, access_logger):
    """Logs each incoming request (IP, method, URL) into access.log."""
    from flask import request

    @app.before_request
    def log_request_info():
        access_logger.info(f"{request.remote_addr} {request.method} {request.url}")


# ==================================================
# OLD LOG CLEANUP & COMPRESSION
# ==================================================
def cleanup_old_logs(app, folder="logs", days=7):
    """Compress rotated logs and delete archives older than `days`."""
    now = time.time()
    for log_file in glob.glob(os.path.join(folder, "*.log.*")):
        if log_file.endswith(".gz"):
            continue
        try:
            with open(log_file, "rb") as f_in:
                with gzip.open(f"{log_file}.gz", "wb") as f_out:
                    f_out.writelines(f_in)
            os.remove(log_file)
            app.logger.info(f"Compressed log: {log_file}")
        except OSError as e:
            app.logger.error(f"Failed to compress {log_file}: {e}")

    for gz_file in glob.glob(os.path.join(folder, "*.gz")):
        if os.stat(gz_file).st_mtime < now - days * 86400:
            os.remove(gz_file)
            app.logger.info(f"Deleted old log: {gz_file}")


# ==================================================
# CLI LOG SUMMARY COMMAND
# ==================================================
LEVELS = ("INFO", "WARNING", "ERROR")
LOG_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}).*\[(INFO|ERROR|WARNING)\]")


def summarize_log_dir(log_dir, days=7):
    """Count INFO/WARNING/ERROR lines per day in app.log* and error.log*."""
    summary = defaultdict(lambda: dict.fromkeys(LEVELS, 0))
    if not os.path.isdir(log_dir):
        return summary
    now = datetime.now()

    for filename in os.listdir(log_dir):
        if not filename.startswith(("app.log", "error.log")):
            continue

        path = os.path.join(log_dir, filename)
        mtime = datetime.fromtimestamp(os.path.getmtime(path))
        if (now - mtime).days > days:
            continue

        opener = gzip.open if filename.endswith(".gz") else open
        try:
            with opener(path, "rt", encoding="utf-8", errors="ignore") as f:
                for line in f:
                    match = LOG_PATTERN.match(line)
                    if match:
                        date_str, level = match.groups()
                        summary[date_str][level] += 1
        except OSError as e:
            click.echo(f"Could not read {filename}: {e}")

    return summary


def format_counts(counts):
    return "  ".join(f"{level}: {counts[level]:<5}" for level in LEVELS)


@click.command("logs:summary")
@click.option("--days", default=7, help="Days of logs to summarize")
@with_appcontext
def summarize_logs(days):
    """Print per-day INFO/WARNING/ERROR counts from the service logs."""
    log_dir = current_app.config["CATALOG_SETTINGS"].log_dir
    summary = summarize_log_dir(log_dir, days)
    if not summary:
        click.echo(f"No log entries in {log_dir} for the last {days} day(s).")
        return

    totals = dict.fromkeys(LEVELS, 0)
    click.echo(f"Log summary for {log_dir}")
    for date_str in sorted(summary):
        counts = summary[date_str]
        for level in LEVELS:
            totals[level] += counts[level]
        click.echo(f"{date_str}  {format_counts(counts)}")
    click.echo(f"Total       {format_counts(totals)}")
