"""Root logger setup for the pdist runner."""

import logging
from pathlib import Path
from datetime import datetime
from zoneinfo import ZoneInfo


def setup_logging(
    level: str = "INFO",
    component: str = "runner",
    base_dir: str | Path = "logs",
) -> Path:
    """Send records to stderr and to <base_dir>/<component>/YYYY-MM-DD.log.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output. The date is the Berlin calendar day. Returns the log
    file path.
    """

    log_dir = Path(base_dir) / component
    log_dir.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now(ZoneInfo("Europe/Berlin")).strftime("%Y-%m-%d")
    log_path = log_dir / f"{date_str}.log"

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(fh)
    root.addHandler(sh)
    return log_path
