# This file is part of aarduca, Unicode Collation Algorithm for Aard Dictionary.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3
# as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License <http://www.gnu.org/licenses/gpl-3.0.txt>
# for more details.
#
# Copyright (C) 2008-2010  Jeremy Mortis, Igor Tkach

import logging
import time
import threading

log = logging.getLogger(__name__)

_nesting = threading.local()


def timef(f):
    """
    Log how long each call to ``f`` took, indented by how many timed
    calls are in progress in the current thread.

    """

    def new_func(*args, **kw):
        depth = getattr(_nesting, 'depth', 0)
        _nesting.depth = depth + 1
        t0 = time.time()
        try:
            return f(*args, **kw)
        finally:
            _nesting.depth = depth
            log.debug('%s%s took %.1f ms in thread %s', '  ' * depth,
                      f.__name__, (time.time() - t0)*1000,
                      threading.current_thread().name)
    new_func.__name__ = f.__name__
    new_func.__doc__ = f.__doc__
    return new_func
