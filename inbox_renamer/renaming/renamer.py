import os
import threading
from collections.abc import Callable
from datetime import date
from pathlib import Path

from inbox_renamer.filesystem.timestamps import creation_date
from inbox_renamer.logging.logger import Log
from inbox_renamer.metadata.models import DocumentMetadata
from inbox_renamer.processor.models import MovedToReview, Renamed
from inbox_renamer.renaming.exceptions import FilesystemError
from inbox_renamer.renaming.filenames import normalize_filename_component, unique_path

OUTPUT_DATE_FORMAT = "%Y-%m-%d"
REVIEW_PREFIX = "0000-00-00_Review_"


class Renamer:
    """Renames a document after its metadata, or quarantines it for review.

    Never overwrites an existing file: a destination that appears after the
    collision search is treated as one more collision.
    """

    def __init__(
        self,
        *,
        review_folder_name: str = "Review",
        extension: str = "pdf",
        max_filename_length: int = 70,
        fallback_date: Callable[[Path], date | None] = creation_date,
    ) -> None:
        self._review_folder_name = review_folder_name
        self._extension = extension
        self._max_filename_length = max_filename_length
        self._fallback_date = fallback_date
        self._lock = threading.Lock()

    def apply(
        self, metadata: DocumentMetadata, path: Path, root: Path
    ) -> Renamed | MovedToReview:
        """Move ``path`` to its normalized name in ``root`` or into the review folder.

        Raises:
            FilesystemError: if creating the review folder or moving the file fails.
        """
        subject = normalize_filename_component(metadata.subject or "")
        if not subject:
            Log.info(f"No usable subject for {path.name}")
            return self._move_to_review(path, root)

        found_date = metadata.date or self._fallback_date(path)
        if found_date is None:
            Log.info(f"No usable date for {path.name}")
            return self._move_to_review(path, root)

        proposed = f"{found_date.strftime(OUTPUT_DATE_FORMAT)}_{subject}"
        proposed = proposed[: self._max_filename_length].rstrip("_-")
        return Renamed(new_path=self._move(path, proposed, root))

    def _move_to_review(self, path: Path, root: Path) -> MovedToReview:
        review_folder = root / self._review_folder_name
        try:
            review_folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Could not create {review_folder}: {exc}") from exc

        base_name = REVIEW_PREFIX + normalize_filename_component(path.stem)
        return MovedToReview(review_path=self._move(path, base_name, review_folder))

    def _move(self, source: Path, base_name: str, folder: Path) -> Path:
        # Pool threads share one Renamer; the lock keeps name choice and link together.
        with self._lock:
            destination = self._link_unique(source, base_name, folder)
            try:
                source.unlink()
            except OSError as exc:
                destination.unlink(missing_ok=True)
                raise FilesystemError(
                    f"Could not move {source.name} to {destination.name}: {exc}"
                ) from exc
        Log.info(f"Moved {source.name} -> {destination}")
        return destination

    def _link_unique(self, source: Path, base_name: str, folder: Path) -> Path:
        while True:
            destination = unique_path(base_name, self._extension, folder)
            try:
                # Unlike rename, link refuses an existing destination.
                os.link(source, destination)
            except FileExistsError:
                Log.debug(f"{destination.name} was taken before {source.name} moved, retrying")
                continue
            except OSError as exc:
                raise FilesystemError(
                    f"Could not move {source.name} to {destination.name}: {exc}"
                ) from exc
            return destination
