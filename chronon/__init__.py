
#
# Chronon -- Gregorian points in time, with UTC offsets and DST transitions
#
# Copyright (c) 2013, Hard Consulting Corporation.
#
# Chronon is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  See the LICENSE file at the top of the source tree.
#
# Chronon is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#

__author__                      = "Perry Kundert"
__email__                       = "perry@hardconsulting.com"
__copyright__                   = "Copyright (c) 2013 Hard Consulting Corporation"
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
chronon -- Gregorian points in time, precise to 1ms, with UTC offsets and DST transitions

    DateTime		-- A point in time, seen from a TimeZone
    TimeZone		-- A standard UtcOffset, and the TransitionRules in and out of DST
    ZoneProvider	-- Loads TimeZones by name from the IANA tz database (via pytz)

"""

from .version		import __version__, __version_info__
from .misc		import log_cfg, lazystr, mutexmethod, timer
from .gregorian		import (
    Month, Weekday, Fields, is_leap_year, days_in_year, days_in_month, MIN_YEAR, MAX_YEAR )
from .offset		import UtcOffset, InvalidFormatError
from .transition	import TransitionRule, LastWeekday, NthWeekday
from .zone		import TimeZone, UTC
from .times		import DateTime
from .zones		import ZoneProvider, zone_from_pytz, zone_names
from .formatter		import StrftimeFormatter
