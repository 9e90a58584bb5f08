import argparse
from datetime import datetime
import logging
import signal
import sys

from tontrack_api import create_app

from tontrack_monitor.Clipboard import Clipboard
from tontrack_monitor.ClipboardNotifier import ClipboardNotifier
from tontrack_monitor.Controller import Controller
from tontrack_monitor.DataStore import DataStore
from tontrack_monitor.EventBus import (
    EventBus,
    ROUND_ENDED,
    ROUND_STARTED,
    STATE_UPDATED,
)
from tontrack_monitor.Init import Init
from tontrack_monitor.LogMonitor import LogMonitor
from tontrack_monitor.RoundStateMachine import RoundStateMachine


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terrors of Nowhere round tracker")
    parser.add_argument("--config", default="settings.toml",
                        help="Path to the settings file (default: settings.toml)")
    parser.add_argument("--data", default=None,
                        help="Path to the JSON data file (default: from settings)")
    parser.add_argument("--log-dir", default=None,
                        help="VRChat log directory, saved to the settings file")
    parser.add_argument("--host", default=None,
                        help="Control API bind address (default: from settings)")
    parser.add_argument("--port", type=int, default=None,
                        help="Control API port (default: from settings)")
    parser.add_argument("--no-api", action="store_true",
                        help="Run the monitor without the control API")
    parser.add_argument("--log", default="ERROR",
                        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR.")
    parser.add_argument("--log-to-file", action="store_true",
                        help="Save logs to txt file.")

    return parser.parse_args(argv)


def setup_logging(log: str, log_to_file: bool) -> None:
    level_name = log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log}")

    handlers = [logging.StreamHandler()]
    if log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        handlers.append(logging.FileHandler(f"{timestamp}.txt"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log, args.log_to_file)

    # Load settings from file, otherwise use default values if file not available
    settings = Init.settings(args.config)
    if args.log_dir:
        settings.set("log_dir", args.log_dir)
        settings.save()

    store = DataStore(args.data or settings.get("data_path", "data.json"))
    context = Init.context(settings, store)
    terror_data = Init.terror_data(settings)
    overlay = Init.overlay(settings)

    events = EventBus()
    events.subscribe(STATE_UPDATED, lambda snapshot: logging.debug(
        f"State updated: {len(snapshot.history)} codes, {snapshot.stats.total_rounds} rounds"
    ))
    events.subscribe(ROUND_STARTED, lambda _: logging.info("Round started, switching to info tab"))
    events.subscribe(ROUND_ENDED, lambda _: logging.info("Round ended, switching to history tab"))

    monitor = LogMonitor(
        context,
        RoundStateMachine(terror_data, history_limit=settings.get("history_limit", 10)),
        ClipboardNotifier(Clipboard()),
        store,
        events,
        terror_data,
        overlay,
        interval=settings.get("poll_interval", LogMonitor.POLL_INTERVAL)
    )
    controller = Controller(context, terror_data, overlay)

    def shutdown(signum, frame):
        logging.info("Shutting down...")
        monitor.stop()
        controller.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    controller.start_overlay_if_enabled()
    monitor.start()

    if args.no_api:
        monitor.join()
        return

    api = settings.section("api")
    app = create_app(controller)
    app.run(
        host=args.host or api.get("host", "127.0.0.1"),
        port=args.port or api.get("port", 5125),
        threaded=True,
        use_reloader=False
    )

    monitor.stop()
    controller.shutdown()


if __name__ == "__main__":
    main()
