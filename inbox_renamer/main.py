import sys
import time

from inbox_renamer.config.settings import Settings
from inbox_renamer.logging.logger import Log
from inbox_renamer.status.processing_log import ProcessingLog
from inbox_renamer.worker.coordinator import build_coordinator


def main() -> int:
    """Entry point: load settings -> build coordinator -> watch until interrupted."""
    settings = Settings()
    Log.configure(settings.log_level, settings.log_file)

    folder = settings.watch_folder
    if folder is None or not folder.expanduser().is_dir():
        Log.error(f"WATCH_FOLDER must point to an existing directory (got {folder})")
        return 1

    processing_log = ProcessingLog()
    coordinator = build_coordinator(settings, processing_log)
    coordinator.start()
    processing_log.watching(coordinator.root)
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        Log.info("Shutting down")
    finally:
        coordinator.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
