
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

__all__				= [ "UtcOffset", "InvalidFormatError" ]

import re

from .gregorian		import (
    MINUTES_PER_HOUR, SECONDS_PER_MINUTE, MILLISECONDS_PER_SECOND )


class InvalidFormatError( ValueError ):
    """Some text could not be parsed in the expected format."""
    pass


class UtcOffset:
    """An immutable offset from UTC, in signed hours and minutes.  Both parts carry the sign of the
    offset (either may be zero), eg. -05:30 is UtcOffset( -5, -30 ).

    """
    _pattern			= re.compile( r'([+-])([0-9]{2}):?([0-9]{2})' )

    __slots__			= ( '_hours', '_minutes' )

    def __init__( self, hours, minutes=0 ):
        # 0 hours or 0 minutes are compatible whatever the other is; otherwise, the signs must match
        if ( hours > 0 and minutes < 0 ) or ( hours < 0 and minutes > 0 ):
            raise ValueError( "Expected hours and minutes with compatible signs, found %d and %d" % (
                hours, minutes ))
        if not -MINUTES_PER_HOUR < minutes < MINUTES_PER_HOUR:
            raise ValueError( "Expected minutes between -59 and 59 inclusive, found %d" % ( minutes ))
        self._hours		= int( hours )
        self._minutes		= int( minutes )

    @classmethod
    def parse( cls, offset ):
        """Parse a '+HHMM' or '+HH:MM' offset; the sign applies to both hours and minutes."""
        match			= cls._pattern.fullmatch( offset ) if isinstance( offset, str ) else None
        if not match:
            raise InvalidFormatError( 'Expected valid timezone offset, found "%s"' % ( offset ))
        sign,hours,minutes	= match.groups()
        if sign == '-':
            return cls( -int( hours ), -int( minutes ))
        return cls( int( hours ), int( minutes ))

    @classmethod
    def from_minutes( cls, minutes ):
        """An offset of the given signed number of minutes, eg. -330 ==> -05:30."""
        hours,remainder		= divmod( abs( minutes ), MINUTES_PER_HOUR )
        if minutes < 0:
            return cls( -hours, -remainder )
        return cls( hours, remainder )

    @property
    def hours( self ):
        return self._hours

    @property
    def minutes( self ):
        return self._minutes

    def total_minutes( self ):
        return self._hours * MINUTES_PER_HOUR + self._minutes

    def offset( self, colon=False ):
        """Render as '+HHMM', or '+HH:MM' if colon is requested."""
        return "%s%02d%s%02d" % (
            "-" if self._hours < 0 or self._minutes < 0 else "+",
            abs( self._hours ), ":" if colon else "", abs( self._minutes ))

    def offset_seconds( self ):
        return self.total_minutes() * SECONDS_PER_MINUTE

    def offset_milliseconds( self ):
        return self.offset_seconds() * MILLISECONDS_PER_SECOND

    def __eq__( self, rhs ):
        if not isinstance( rhs, UtcOffset ):
            return NotImplemented
        return ( self._hours, self._minutes ) == ( rhs._hours, rhs._minutes )

    def __hash__( self ):
        return hash(( self._hours, self._minutes ))

    def __str__( self ):
        return self.offset( colon=True )

    def __repr__( self ):
        return '<%s %s>' % ( self.__class__.__name__, self )
