
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
gregorian	-- The proleptic Gregorian calendar, to millisecond precision

    All of the calendar arithmetic used to convert between a count of milliseconds since the UNIX
epoch (1970-01-01 00:00:00.000 UTC) and the Gregorian (year, month, day, hour, minute, second,
millisecond) fields.  Nothing here knows about timezones; the fields are whatever wall-clock the
caller says they are.

"""
__all__				= [ "Month", "Weekday", "Fields",
                                    "is_leap_year", "days_in_year", "days_in_month", "days_before_month",
                                    "milliseconds_from_fields", "fields_from_milliseconds", "weekday_of",
                                    "MIN_YEAR", "MAX_YEAR", "EPOCH", "EPOCH_WEEKDAY" ]

import collections
import enum

MIN_YEAR			= -9999
MAX_YEAR			=  9999

MILLISECONDS_PER_SECOND		= 1000
SECONDS_PER_MINUTE		= 60
MINUTES_PER_HOUR		= 60
HOURS_PER_DAY			= 24
DAYS_PER_WEEK			= 7
MONTHS_PER_YEAR			= 12

MILLISECONDS_PER_MINUTE		= MILLISECONDS_PER_SECOND * SECONDS_PER_MINUTE
MILLISECONDS_PER_HOUR		= MILLISECONDS_PER_MINUTE * MINUTES_PER_HOUR
MILLISECONDS_PER_DAY		= MILLISECONDS_PER_HOUR * HOURS_PER_DAY


def is_leap_year( year ):
    return year % 4 == 0 and ( year % 100 != 0 or year % 400 == 0 )


def days_in_year( year ):
    return 366 if is_leap_year( year ) else 365


def days_in_month( month, year=0 ):
    """The number of days in the month (a Month, or 1-12).  The year only matters for February."""
    month			= Month( month )
    if month in ( Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER ):
        return 30
    if month is Month.FEBRUARY:
        return 29 if is_leap_year( year ) else 28
    return 31


def days_before_month( month, year ):
    """The number of days in year preceding the 1st of month."""
    return sum( days_in_month( m, year ) for m in range( 1, Month( month ).value ))


class Month( enum.Enum ):
    """The months of the Gregorian year, ordered and cyclic."""
    JANUARY			= 1
    FEBRUARY			= 2
    MARCH			= 3
    APRIL			= 4
    MAY				= 5
    JUNE			= 6
    JULY			= 7
    AUGUST			= 8
    SEPTEMBER			= 9
    OCTOBER			= 10
    NOVEMBER			= 11
    DECEMBER			= 12

    def day_count( self, year=0 ):
        return days_in_month( self, year )

    def is_before( self, month ):
        return self.value < month.value

    def is_after( self, month ):
        return month.value < self.value

    def advance( self, months ):
        """The month 'months' (>= 0) after this one."""
        if months < 0:
            raise ValueError( "Expected months >= 0, found %d" % ( months ))
        return Month( 1 + ( self.value - 1 + months ) % MONTHS_PER_YEAR )

    def back( self, months ):
        """The month 'months' (>= 0) before this one."""
        if months < 0:
            raise ValueError( "Expected months >= 0, found %d" % ( months ))
        return self.advance( MONTHS_PER_YEAR - months % MONTHS_PER_YEAR )

    def next( self ):
        return self.advance( 1 )

    def previous( self ):
        return self.back( 1 )

    def distance_to( self, month ):
        """Count of months forward from this month to another, in [0,11]."""
        return ( month.value - self.value ) % MONTHS_PER_YEAR

    def distance_from( self, month ):
        """Count of months forward from another month to this one."""
        return month.distance_to( self )


class Weekday( enum.Enum ):
    """The days of the week, ordered from Monday and cyclic."""
    MONDAY			= 0
    TUESDAY			= 1
    WEDNESDAY			= 2
    THURSDAY			= 3
    FRIDAY			= 4
    SATURDAY			= 5
    SUNDAY			= 6

    def is_before( self, weekday ):
        return self.value < weekday.value

    def is_after( self, weekday ):
        return weekday.value < self.value

    def advance( self, days ):
        if days < 0:
            raise ValueError( "Expected days >= 0, found %d" % ( days ))
        return Weekday(( self.value + days ) % DAYS_PER_WEEK )

    def back( self, days ):
        if days < 0:
            raise ValueError( "Expected days >= 0, found %d" % ( days ))
        return self.advance( DAYS_PER_WEEK - days % DAYS_PER_WEEK )

    def next( self ):
        return self.advance( 1 )

    def previous( self ):
        return self.back( 1 )

    def distance_to( self, weekday ):
        """Count of days forward from this day to another, in [0,6]."""
        return ( weekday.value - self.value ) % DAYS_PER_WEEK

    def distance_from( self, weekday ):
        return weekday.distance_to( self )


# The Gregorian fields of a point in time; month is always a Month
Fields				= collections.namedtuple(
    'Fields', [ 'year', 'month', 'day', 'hour', 'minute', 'second', 'millisecond' ] )

EPOCH				= Fields( 1970, Month.JANUARY, 1, 0, 0, 0, 0 )
EPOCH_WEEKDAY			= Weekday.THURSDAY


def _ordinal( year, month, day, hour, minute, second, millisecond ):
    return ( year, Month( month ).value, day, hour, minute, second, millisecond )


def _time_of_day( hour, minute, second, millisecond ):
    return ( hour * MILLISECONDS_PER_HOUR + minute * MILLISECONDS_PER_MINUTE
             + second * MILLISECONDS_PER_SECOND + millisecond )


def milliseconds_after_epoch( year, month, day, hour, minute, second, millisecond ):
    """Milliseconds elapsed from the epoch up to the (UTC) fields, which must not precede it."""
    assert _ordinal( year, month, day, hour, minute, second, millisecond ) >= _ordinal( *EPOCH ), \
        "Expected fields at or after the epoch: %r" % ( ( year, month, day ), )
    days			= sum( days_in_year( y ) for y in range( EPOCH.year, year ))
    days		       += days_before_month( month, year )
    days		       += day - 1
    return days * MILLISECONDS_PER_DAY + _time_of_day( hour, minute, second, millisecond )


def milliseconds_before_epoch( year, month, day, hour, minute, second, millisecond ):
    """Milliseconds from the (UTC) fields up to the epoch, which they must precede."""
    assert _ordinal( year, month, day, hour, minute, second, millisecond ) < _ordinal( *EPOCH ), \
        "Expected fields before the epoch: %r" % ( ( year, month, day ), )
    month			= Month( month )
    # The remainder of the day, then the rest of the month, year and every whole year 'til 1970
    milliseconds		= MILLISECONDS_PER_DAY - _time_of_day( hour, minute, second, millisecond )
    days			= days_in_month( month, year ) - day
    days		       += sum( days_in_month( m, year ) for m in range( month.value + 1, 13 ))
    days		       += sum( days_in_year( y ) for y in range( year + 1, EPOCH.year ))
    return milliseconds + days * MILLISECONDS_PER_DAY


def milliseconds_from_fields( year, month, day, hour=0, minute=0, second=0, millisecond=0 ):
    """Signed milliseconds since the epoch of the given UTC fields."""
    if _ordinal( year, month, day, hour, minute, second, millisecond ) < _ordinal( *EPOCH ):
        return -milliseconds_before_epoch( year, month, day, hour, minute, second, millisecond )
    return milliseconds_after_epoch( year, month, day, hour, minute, second, millisecond )


def _decompose( year, month, remainder ):
    """Split milliseconds elapsed since the start of month into Fields."""
    assert 0 <= remainder < days_in_month( month, year ) * MILLISECONDS_PER_DAY, \
        "Expected remainder within %04d-%02d, found %d" % ( year, month.value, remainder )
    day,remainder		= divmod( remainder, MILLISECONDS_PER_DAY )
    hour,remainder		= divmod( remainder, MILLISECONDS_PER_HOUR )
    minute,remainder		= divmod( remainder, MILLISECONDS_PER_MINUTE )
    second,millisecond		= divmod( remainder, MILLISECONDS_PER_SECOND )
    return Fields( year, month, day + 1, hour, minute, second, millisecond )


def fields_from_milliseconds( milliseconds ):
    """The UTC Fields of the signed milliseconds since the epoch.

    Walks forward from the epoch a year, then a month at a time, or (before the epoch) backward from
    the end of 1969; the final remainder is decomposed into the day and time of day.

    """
    if milliseconds == 0:
        return EPOCH

    if milliseconds > 0:
        year,remainder		= EPOCH.year,milliseconds
        while remainder >= days_in_year( year ) * MILLISECONDS_PER_DAY:
            remainder	       -= days_in_year( year ) * MILLISECONDS_PER_DAY
            year	       += 1
        month			= Month.JANUARY
        while remainder >= days_in_month( month, year ) * MILLISECONDS_PER_DAY:
            remainder	       -= days_in_month( month, year ) * MILLISECONDS_PER_DAY
            month		= month.next()
        return _decompose( year, month, remainder )

    # Count backwards from the end of 1969; 'remainder' is always how far before the end of 'year'
    # (and then 'month') the instant lies, in (0,length].
    year,remainder		= EPOCH.year - 1,-milliseconds
    while remainder > days_in_year( year ) * MILLISECONDS_PER_DAY:
        remainder	       -= days_in_year( year ) * MILLISECONDS_PER_DAY
        year		       -= 1
    month			= Month.DECEMBER
    while remainder > days_in_month( month, year ) * MILLISECONDS_PER_DAY:
        remainder	       -= days_in_month( month, year ) * MILLISECONDS_PER_DAY
        month			= month.previous()
    return _decompose( year, month, days_in_month( month, year ) * MILLISECONDS_PER_DAY - remainder )


def weekday_of( year, month, day ):
    """The Weekday of a Gregorian date."""
    days			= milliseconds_from_fields( year, month, day ) // MILLISECONDS_PER_DAY
    return EPOCH_WEEKDAY.advance( days % DAYS_PER_WEEK )
