from __future__ import annotations

import argparse
import signal
import threading

from .assets import INDEX_HTML, STYLE_CSS
from .config import load_config, read_asset
from .errors import WallclockError
from .logging_setup import configure_logging
from .scheduler import TICK_INTERVAL, IntervalTicker, run
from .targets import KINDS, open_target
from .widget import ClockWidget

def _install_stop_handler(ticker: IntervalTicker) -> None:
    if threading.current_thread() is not threading.main_thread():
        return
    signal.signal(signal.SIGTERM, lambda signum, frame: ticker.stop())

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="wallclock")
    ap.add_argument("--config", help="Path to config.yaml (defaults apply when omitted)")
    ap.add_argument("--target", choices=KINDS, help="Override target.kind from config")
    ap.add_argument("--once", action="store_true", help="Render a single frame and exit")
    ap.add_argument("--log-level", help="Override logging.level from config")
    args = ap.parse_args(argv)

    log = configure_logging()

    try:
        cfg = load_config(args.config).validate()
        log.setLevel(args.log_level.upper() if args.log_level else cfg.log_level)
        clock_cfg = cfg.clock
        kind = args.target or cfg.target_kind
        stylesheet = read_asset(cfg.stylesheet_path, STYLE_CSS)
        markup = read_asset(cfg.markup_path, INDEX_HTML)
    except ValueError as e:
        log.error("Could not parse config: %s", e)
        return 1

    log.info("Loading module %s", ClockWidget.name)

    try:
        target = open_target(kind, cfg)
    except WallclockError as e:
        log.error("Could not create module: %s", e)
        return 1

    with target:
        widget = ClockWidget(target, clock_cfg, stylesheet=stylesheet, markup=markup, log=log)
        try:
            widget.setup()
        except WallclockError as e:
            log.error("Could not setup module: %s", e)
            return 1

        if args.once:
            widget.update()
            return 0

        ticker = IntervalTicker(TICK_INTERVAL)
        _install_stop_handler(ticker)
        try:
            run(widget.update, ticker)
        except KeyboardInterrupt:
            log.info("Exiting...")
    return 0
