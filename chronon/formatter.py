
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

__all__				= [ "StrftimeFormatter" ]

import datetime
import logging

from .gregorian		import SECONDS_PER_MINUTE
from .offset		import UtcOffset
from .times		import DateTime
from .zone		import TimeZone

log				= logging.getLogger( __package__ )


class StrftimeFormatter:
    """Formats and parses DateTimes using the platform's strftime/strptime directives (eg. '%Y-%m-%d
    %H:%M:%S.%f %z').  Only years 1-9999 can be represented.

    """
    def format( self, dt, pattern ):
        return dt.to_datetime().strftime( pattern )

    def parse( self, text, pattern, timezone=None ):
        """Parse text in the pattern.  If the text carries a UTC offset (%z), the result is in a
        fixed-offset zone named by the offset; otherwise, it is the wall-clock time in timezone
        (default: UTC).  Microseconds are truncated to milliseconds.

        """
        parsed			= datetime.datetime.strptime( text, pattern )
        if parsed.utcoffset() is not None:
            offset		= UtcOffset.from_minutes(
                int( parsed.utcoffset().total_seconds() ) // SECONDS_PER_MINUTE )
            timezone		= TimeZone( offset.offset( colon=True ), offset )
        log.debug( "Parsed %r w/ %r: %s in %s", text, pattern, parsed, timezone )
        return DateTime( parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute,
                         parsed.second, parsed.microsecond // 1000, timezone=timezone )
