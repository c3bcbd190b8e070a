from __future__ import annotations

import os
from pathlib import Path
import sys

from loguru import logger

from app.viewmodels.session_vm import SessionVM
from infrastructure.logging import init_logging
from infrastructure.settings import load_app_settings

BASE_DIR = Path(__file__).parent


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = load_app_settings(BASE_DIR / "settings.json")
    init_logging(settings.log_dir, settings.log_level)

    directory = args[0] if args else os.getcwd()
    initial_file = args[1] if len(args) > 1 else None

    vm = SessionVM(autosave=settings.autosave, advance_after_skip=settings.advance_after_skip)
    vm.open_directory(directory, initial_file=initial_file)
    if vm.metadata_warning:
        logger.warning("Metadata could not be read, starting empty: {}", vm.metadata_warning)

    current = vm.current_image()
    logger.info(
        "Ready: {} images, {} pinned, {} skipped, current={} {}",
        vm.catalog.size,
        vm.store.pinned_count,
        vm.store.skipped_count,
        current.file_name if current else None,
        vm.position_text,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
