"""
Library modules for PhotoMoments.

Name parsing helpers and the moments worker, usable without the web app.
"""
from photomoments.lib.convert import to_int, is_uint, country_code, year_from
from photomoments.lib.timestamp import time_from_string
from photomoments.lib.search import PhotoSearch, FilterError
from photomoments.lib.guard import RunGuard, WorkerBusyError, main_worker
from photomoments.lib.moments import MomentsWorker, MomentSource, moment_threshold, merge_label_filter

__all__ = [
    # Name parsing
    'to_int',
    'is_uint',
    'country_code',
    'year_from',
    'time_from_string',
    # Album filters
    'PhotoSearch',
    'FilterError',
    # Run control
    'RunGuard',
    'WorkerBusyError',
    'main_worker',
    # Moments
    'MomentsWorker',
    'MomentSource',
    'moment_threshold',
    'merge_label_filter',
]
