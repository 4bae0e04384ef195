"""
Moment discovery: creates albums from popular folders, months, places and labels.

The worker counts the catalog, derives a minimum photo count from its size,
then walks five moment sources in a fixed order. Every candidate is matched
against existing albums by slug and type:
- missing albums are created
- deleted albums are left alone, they are never recreated
- existing albums are left alone, except label moments whose filter
  accumulates new labels

Failures are contained: a failed query skips its source, a failed insert or
update or a candidate with invalid values skips that candidate, and anything
unexpected ends the run without raising. Only a start while another run is
active raises WorkerBusyError.
"""
from dataclasses import dataclass
from typing import Callable, Optional
import gc
import logging
import math

from sqlalchemy.exc import SQLAlchemyError

from photomoments import db
from photomoments.models import Album, AlbumType, AlbumState, UNKNOWN_COUNTRY
from photomoments.lib import queries
from photomoments.lib.guard import RunGuard, WorkerBusyError, main_worker
from photomoments.lib.queries import Counts, Moment
from photomoments.lib.search import PhotoSearch, FilterError
from photomoments.lib.text import quote, words, unique_words

logger = logging.getLogger(__name__)

MIN_THRESHOLD = 3

# Reconcile outcomes, also used as result counters
CREATED = 'created'
UPDATED = 'updated'
SKIPPED = 'skipped'
FAILED = 'failed'


def moment_threshold(index_size: int) -> int:
    """
    Minimum number of photos a moment needs, growing with the catalog size.

    Examples:
        >>> moment_threshold(4)
        3
        >>> moment_threshold(1024)
        11
    """
    if index_size <= 4:
        return MIN_THRESHOLD
    return int(math.log2(index_size)) + 1


def merge_label_filter(stored: str, label: str) -> str:
    """
    Add a label to a serialized filter's label list.

    Args:
        stored: Serialized PhotoSearch of an existing album
        label: Label to add

    Returns:
        Serialized filter with the label appended, duplicates removed

    Raises:
        FilterError: If the stored filter can not be parsed
    """
    f = PhotoSearch.deserialize(stored)
    f.label = ','.join(unique_words(words(f.label) + [label]))
    return f.serialize()


@dataclass
class MomentSource:
    """
    One moment dimension: how to find candidates and how to turn them into albums.

    Attributes:
        name: Dimension name for logs and results
        album_type: Type of the albums this source creates
        fetch: Query returning candidates with at least the given photo count
        build_filter: Search filter for a candidate
        new_album: Builds an unsaved Album from a candidate and its serialized filter
        fixed_threshold: Used instead of the computed threshold when set
        merge_filter: Combines a stored filter with a candidate; only set for
                      dimensions whose existing albums may change
    """
    name: str
    album_type: AlbumType
    fetch: Callable[[int], list[Moment]]
    build_filter: Callable[[Moment], PhotoSearch]
    new_album: Callable[[Moment, str], Album]
    fixed_threshold: Optional[int] = None
    merge_filter: Optional[Callable[[str, Moment], str]] = None

    @property
    def updatable(self) -> bool:
        return self.merge_filter is not None

    def threshold(self, computed: int) -> int:
        if self.fixed_threshold is not None:
            return self.fixed_threshold
        return computed


def _folder_album(mom: Moment, filter_str: str) -> Album:
    album = Album.new_folder_album(mom.title(), mom.slug(), filter_str)
    album.album_path = mom.path
    album.album_year = mom.year
    album.album_month = mom.month
    album.album_country = mom.country or UNKNOWN_COUNTRY
    return album


def _month_album(mom: Moment, filter_str: str) -> Album:
    return Album.new_month_album(mom.title(), mom.slug(), mom.year, mom.month, filter_str)


def _country_album(mom: Moment, filter_str: str) -> Album:
    album = Album.new_moments_album(mom.title(), mom.slug(), filter_str)
    album.album_year = mom.year
    album.album_country = mom.country
    return album


def _state_album(mom: Moment, filter_str: str) -> Album:
    album = Album.new_moments_album(mom.title(), mom.slug(), filter_str)
    album.album_country = mom.country
    album.album_state = mom.state
    return album


def _label_album(mom: Moment, filter_str: str) -> Album:
    return Album.new_moments_album(mom.title(), mom.slug(), filter_str)


def default_sources() -> list[MomentSource]:
    """The five moment dimensions in processing order."""
    return [
        MomentSource(
            name='folders',
            album_type=AlbumType.FOLDER,
            fetch=queries.album_folders,
            build_filter=lambda m: PhotoSearch(path=m.path),
            new_album=_folder_album,
            fixed_threshold=1,
        ),
        MomentSource(
            name='months',
            album_type=AlbumType.MONTH,
            fetch=queries.moments_time,
            build_filter=lambda m: PhotoSearch(year=m.year, month=m.month),
            new_album=_month_album,
            fixed_threshold=1,
        ),
        MomentSource(
            name='countries',
            album_type=AlbumType.MOMENT,
            fetch=queries.moments_countries,
            build_filter=lambda m: PhotoSearch(year=m.year, country=m.country),
            new_album=_country_album,
        ),
        MomentSource(
            name='states',
            album_type=AlbumType.MOMENT,
            fetch=queries.moments_states,
            build_filter=lambda m: PhotoSearch(country=m.country, state=m.state),
            new_album=_state_album,
        ),
        MomentSource(
            name='labels',
            album_type=AlbumType.MOMENT,
            fetch=queries.moments_labels,
            build_filter=lambda m: PhotoSearch(label=m.label),
            new_album=_label_album,
            merge_filter=lambda stored, m: merge_label_filter(stored, m.label),
        ),
    ]


class MomentsWorker:
    """Creates albums based on popular locations, dates and labels."""

    def __init__(self, guard: Optional[RunGuard] = None,
                 sources: Optional[list[MomentSource]] = None):
        self.guard = guard if guard is not None else main_worker
        self.sources = sources

    def start(self) -> dict:
        """
        Run moment discovery once.

        Must be called inside a Flask application context.

        Returns:
            Dictionary with result info:
            {
                'status': 'completed' | 'skipped' | 'cancelled' | 'failed',
                'threshold': int,
                'created': int, 'updated': int, 'skipped': int, 'failed': int,
                'failed_sources': [str, ...]
            }

        Raises:
            WorkerBusyError: If another run holds the guard
        """
        try:
            self.guard.start()
        except WorkerBusyError as e:
            logger.error(f"moments: {e}")
            raise

        result = {
            'status': 'running',
            'threshold': 0,
            CREATED: 0,
            UPDATED: 0,
            SKIPPED: 0,
            FAILED: 0,
            'failed_sources': [],
        }

        try:
            self._run(result)
        except Exception as e:
            db.session.rollback()
            result['status'] = 'failed'
            result['error'] = str(e)[:500]
            logger.error(f"moments: {e} [unexpected]", exc_info=True)
        finally:
            self.guard.stop()
            gc.collect()

        return result

    def cancel(self):
        """Stop after the moment source currently being processed."""
        self.guard.cancel()

    def _run(self, result: dict):
        counts = Counts().refresh()
        index_size = counts.index_size
        threshold = moment_threshold(index_size)
        result['threshold'] = threshold

        logger.debug(
            f"moments: index contains {counts.photos} photos and {counts.videos} videos, "
            f"using threshold {threshold}"
        )

        if index_size < threshold:
            logger.debug("moments: nothing to do, index size is smaller than threshold")
            result['status'] = 'skipped'
            return

        sources = self.sources if self.sources is not None else default_sources()

        for source in sources:
            if self.guard.canceled:
                logger.info(f"moments: cancelled before {source.name}")
                result['status'] = 'cancelled'
                return

            self._process_source(source, threshold, result)

        result['status'] = 'completed'
        logger.info(
            f"moments: {result[CREATED]} added, {result[UPDATED]} updated, "
            f"{result[FAILED]} failed"
        )

    def _process_source(self, source: MomentSource, threshold: int, result: dict):
        try:
            candidates = source.fetch(source.threshold(threshold))
        except SQLAlchemyError as e:
            db.session.rollback()
            result['failed_sources'].append(source.name)
            logger.error(f"moments: {source.name} query failed: {e}")
            return

        logger.debug(f"moments: {len(candidates)} {source.name} candidates")

        for mom in candidates:
            try:
                outcome = self.reconcile(source, mom)
            except ValueError as e:
                # Bad catalog values only cost their own candidate
                logger.error(f"moments: invalid {source.name} candidate {mom}: {e}")
                outcome = FAILED
            result[outcome] += 1

    def reconcile(self, source: MomentSource, mom: Moment) -> str:
        """
        Create, skip or update the album for one candidate.

        Returns:
            One of CREATED, UPDATED, SKIPPED, FAILED
        """
        f = source.build_filter(mom)
        slug = mom.slug()

        if not slug:
            logger.error(f"moments: failed to create new moment {quote(mom.title())} ({f.serialize()})")
            return FAILED

        album = Album.find_by_slug(slug, source.album_type)

        if album is None:
            return self._create(source, mom, f)

        if album.state is AlbumState.DELETED:
            logger.debug(f"moments: {quote(album.album_title)} was deleted ({album.album_filter})")
            return SKIPPED

        if not source.updatable:
            logger.debug(f"moments: {quote(album.album_title)} already exists ({album.album_filter})")
            return SKIPPED

        return self._merge(source, album, mom, f)

    def _create(self, source: MomentSource, mom: Moment, f: PhotoSearch) -> str:
        album = source.new_album(mom, f.serialize())

        try:
            album.create()
        except SQLAlchemyError as e:
            logger.error(f"moments: {e}")
            return FAILED

        logger.info(f"moments: added {quote(album.album_title)} ({album.album_filter})")
        return CREATED

    def _merge(self, source: MomentSource, album: Album, mom: Moment, f: PhotoSearch) -> str:
        logger.debug(f"moments: {quote(mom.title())} already exists ({f.serialize()})")

        if f.serialize() == album.album_filter or album.state is AlbumState.DELETED:
            return SKIPPED

        try:
            merged = source.merge_filter(album.album_filter, mom)
        except FilterError as e:
            logger.error(f"moments: {e}")
            return FAILED

        if merged == album.album_filter:
            return SKIPPED

        try:
            album.update('album_filter', merged)
        except SQLAlchemyError as e:
            logger.error(f"moments: {e}")
            return FAILED

        logger.info(f"moments: updated {quote(album.album_title)} ({merged})")
        return UPDATED
