
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
transition	-- When a timezone changes between standard time and daylight saving time

    A TransitionRule recurs once a year, over a range of years: in a certain month, on a day of that
month (either a fixed day, or a day selected by a rule such as "the last Sunday"), at an hour of local
standard time.  From then on, the zone's standard offset is adjusted by the rule's saving (which is
zero for a rule that returns the zone to standard time), until the next rule takes effect.

"""
__all__				= [ "TransitionRule", "LastWeekday", "NthWeekday" ]

from .gregorian		import (
    Month, Weekday, days_in_month, weekday_of, MIN_YEAR, MAX_YEAR, DAYS_PER_WEEK )
from .offset		import UtcOffset


def _expect_year( year ):
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError( "Expected year between %d and %d inclusive, found %d" % (
            MIN_YEAR, MAX_YEAR, year ))


class LastWeekday:
    """Selects the last <weekday> of the month, eg. the last Sunday in March."""
    __slots__			= ( '_weekday', )

    def __init__( self, weekday ):
        self._weekday		= Weekday( weekday )

    @property
    def weekday( self ):
        return self._weekday

    def day_for( self, year, month ):
        _expect_year( year )
        # What weekday is the last of the month?  Back up from it to the weekday we need.
        last			= days_in_month( month, year )
        return last - weekday_of( year, month, last ).distance_from( self._weekday )

    def __eq__( self, rhs ):
        return isinstance( rhs, LastWeekday ) and self._weekday is rhs._weekday

    def __hash__( self ):
        return hash(( LastWeekday, self._weekday ))

    def __repr__( self ):
        return "last %s" % ( self._weekday.name.capitalize() )


class NthWeekday:
    """Selects the n'th (1-4) <weekday> of the month, eg. the second Sunday in March."""
    __slots__			= ( '_nth', '_weekday' )

    def __init__( self, nth, weekday ):
        if not 1 <= nth <= 4:
            raise ValueError( "Expected nth between 1 and 4 inclusive, found %d" % ( nth ))
        self._nth		= nth
        self._weekday		= Weekday( weekday )

    @property
    def nth( self ):
        return self._nth

    @property
    def weekday( self ):
        return self._weekday

    def day_for( self, year, month ):
        _expect_year( year )
        first			= 1 + weekday_of( year, month, 1 ).distance_to( self._weekday )
        return first + ( self._nth - 1 ) * DAYS_PER_WEEK

    def __eq__( self, rhs ):
        return isinstance( rhs, NthWeekday ) and ( self._nth, self._weekday ) == ( rhs._nth, rhs._weekday )

    def __hash__( self ):
        return hash(( NthWeekday, self._nth, self._weekday ))

    def __repr__( self ):
        return "%s %s" % ( { 1: "1st", 2: "2nd", 3: "3rd" }.get( self._nth, "%dth" % self._nth ),
                           self._weekday.name.capitalize() )


class TransitionRule:
    """An annual change of a zone's offset, in effect from_year through to_year (inclusive; ONGOING
    if still in effect).  The day is either a fixed day of the month, or a selector supplying a
    .day_for( year, month ) method.  The hour is in local standard time.

    """
    ONGOING			= MAX_YEAR

    __slots__			= ( '_from_year', '_to_year', '_month', '_day', '_hour', '_saving' )

    def __init__( self, from_year, to_year, month, day, hour, saving_minutes ):
        if to_year < from_year:
            raise ValueError( "Expected to year on or after from year, found from %d and to %d" % (
                from_year, to_year ))
        self._month		= Month( month )
        if isinstance( day, int ):
            # A fixed day must exist in the month in some year; Feb 29 only applies in leap years
            if not 1 <= day <= days_in_month( self._month, 2000 ):
                raise ValueError( "Expected day between 1 and %d inclusive, found %d" % (
                    days_in_month( self._month, 2000 ), day ))
        elif not hasattr( day, 'day_for' ):
            raise ValueError( "Expected a day of the month or a day selector, found %r" % ( day, ))
        if not 0 <= hour <= 23:
            raise ValueError( "Expected hour between 0 and 23 inclusive, found %d" % ( hour ))
        self._from_year		= from_year
        self._to_year		= to_year
        self._day		= day
        self._hour		= hour
        self._saving		= saving_minutes

    @property
    def from_year( self ):
        return self._from_year

    @property
    def to_year( self ):
        return self._to_year

    @property
    def month( self ):
        return self._month

    @property
    def day( self ):
        return self._day

    @property
    def hour( self ):
        return self._hour

    @property
    def saving_minutes( self ):
        return self._saving

    def ongoing( self ):
        return self._to_year == self.ONGOING

    def applies_in( self, year ):
        return self._from_year <= year <= self._to_year

    def day_for_year( self, year ):
        """The day of the month on which the transition occurs in the given year."""
        if not self.applies_in( year ):
            raise ValueError( "Expected year within range %04d-%s, found %04d" % (
                self._from_year, "" if self.ongoing() else "%04d" % self._to_year, year ))
        if isinstance( self._day, int ):
            return self._day
        return self._day.day_for( year, self._month )

    def transition_key( self, year ):
        """The (month, day, hour) of the transition in year; orders transitions within a year."""
        return ( self._month.value, self.day_for_year( year ), self._hour )

    def apply_to_offset( self, base ):
        """The UtcOffset in effect after this transition, for a zone with the given standard offset."""
        return UtcOffset.from_minutes( base.total_minutes() + self._saving )

    def __eq__( self, rhs ):
        if not isinstance( rhs, TransitionRule ):
            return NotImplemented
        return ( self._from_year, self._to_year, self._month, self._day, self._hour, self._saving ) \
            == ( rhs._from_year, rhs._to_year, rhs._month, rhs._day, rhs._hour, rhs._saving )

    def __hash__( self ):
        return hash(( self._from_year, self._to_year, self._month, self._day, self._hour, self._saving ))

    def __repr__( self ):
        return "<%s %04d-%s %s %s %02d:00 %+dm>" % (
            self.__class__.__name__, self._from_year,
            "" if self.ongoing() else "%04d" % self._to_year,
            self._month.name.capitalize(), self._day, self._hour, self._saving )
