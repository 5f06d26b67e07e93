
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

__all__				= [ "TimeZone", "UTC" ]

from .gregorian		import fields_from_milliseconds, Month, MILLISECONDS_PER_SECOND
from .misc		import timer
from .offset		import UtcOffset
from .transition	import TransitionRule


class TimeZone:
    """A named zone: a standard offset from UTC, and the TransitionRules (if any) that move it into
    and out of daylight saving time.  A zone without transitions is a fixed-offset zone.

    Which rule is in effect at some local time is decided as follows: of the rules in effect during
    that year, the one whose transition most recently occurred at or before the local time.  If no
    transition has yet occurred that year, the last transition of the most recent prior year covered
    by any rule remains in effect.  Otherwise, standard time applies.

    """
    __slots__			= ( '_name', '_offset', '_transitions' )

    def __init__( self, name, standard_offset, transitions=None ):
        transitions		= tuple( transitions or () )
        if not all( isinstance( t, TransitionRule ) for t in transitions ):
            raise ValueError( "Expected a sequence of TransitionRule, found %r" % ( transitions, ))
        if not isinstance( standard_offset, UtcOffset ):
            raise ValueError( "Expected a UtcOffset, found %r" % ( standard_offset, ))
        self._name		= name
        self._offset		= standard_offset
        self._transitions	= transitions

    @classmethod
    def parse( cls, text ):
        """A fixed-offset zone named by its '+HH:MM' or '+HHMM' offset."""
        return cls( text, UtcOffset.parse( text ))

    @property
    def name( self ):
        return self._name

    @property
    def standard_offset( self ):
        return self._offset

    @property
    def transitions( self ):
        return self._transitions

    def has_transitions( self ):
        return bool( self._transitions )

    def _scheduled( self, year ):
        """The (key, index, rule) in effect during year, sorted; ties keep their declared order."""
        return sorted(( t.transition_key( year ), i, t )
                      for i,t in enumerate( self._transitions ) if t.applies_in( year ))

    def transitions_for( self, year ):
        """The rules in effect during year, in chronological order of their transition that year."""
        return [ t for _,_,t in self._scheduled( year ) ]

    def transition_for( self, year, month, day, hour ):
        """The rule in effect at the given local time (or None if in standard time)."""
        if not self._transitions:
            return None
        query			= ( Month( month ).value, day, hour )
        effective		= None
        for key,_,t in self._scheduled( year ):
            if key > query:
                break
            effective		= t
        if effective is not None:
            return effective

        # None yet this year; the last rule of the most recent prior year any rule covers remains
        prior			= [ min( t.to_year, year - 1 ) for t in self._transitions if t.from_year < year ]
        if prior:
            return self.transitions_for( max( prior ))[-1]
        return None

    def transition_at( self, milliseconds ):
        """The rule in effect at an instant (milliseconds since the epoch), judged by local standard
        time; unlike local wall-clock time, standard time is never ambiguous.

        """
        if not self._transitions:
            return None
        std			= fields_from_milliseconds( milliseconds + self._offset.offset_milliseconds() )
        return self.transition_for( std.year, std.month, std.day, std.hour )

    def effective_transition( self, at ):
        return self.transition_at( at.unix_timestamp_ms )

    def offset_for( self, year, month, day, hour ):
        """The offset in effect at the given local wall-clock time."""
        transition		= self.transition_for( year, month, day, hour )
        if transition is None:
            return self._offset
        return transition.apply_to_offset( self._offset )

    def offset_at( self, milliseconds ):
        """The offset in effect at an instant (milliseconds since the epoch)."""
        transition		= self.transition_at( milliseconds )
        if transition is None:
            return self._offset
        return transition.apply_to_offset( self._offset )

    def offset( self, at ):
        """The offset in effect at a point in time (anything with a .unix_timestamp_ms)."""
        return self.offset_at( at.unix_timestamp_ms )

    def current_offset( self ):
        return self.offset_at( int( timer() * MILLISECONDS_PER_SECOND ))

    def __eq__( self, rhs ):
        if not isinstance( rhs, TimeZone ):
            return NotImplemented
        return ( self._name, self._offset, self._transitions ) == ( rhs._name, rhs._offset, rhs._transitions )

    def __hash__( self ):
        return hash(( self._name, self._offset, self._transitions ))

    def __str__( self ):
        return self._name

    def __repr__( self ):
        return "<%s %s %s%s>" % (
            self.__class__.__name__, self._name, self._offset,
            ", %d transitions" % len( self._transitions ) if self._transitions else "" )


UTC				= TimeZone( "UTC", UtcOffset( 0, 0 ))
