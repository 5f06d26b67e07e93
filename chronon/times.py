
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

__all__				= [ "DateTime" ]

import datetime

from .gregorian		import (
    Fields, Month, days_in_month, milliseconds_from_fields, fields_from_milliseconds,
    EPOCH_WEEKDAY, MIN_YEAR, MAX_YEAR, DAYS_PER_WEEK, MONTHS_PER_YEAR, MINUTES_PER_HOUR, HOURS_PER_DAY,
    MILLISECONDS_PER_SECOND, MILLISECONDS_PER_MINUTE, MILLISECONDS_PER_HOUR, MILLISECONDS_PER_DAY )
from .misc		import timer
from .zone		import TimeZone, UTC


def _expect( name, value, low, high ):
    if not low <= value <= high:
        raise ValueError( "Expected %s between %d and %d inclusive, found %d" % (
            name, low, high, value ))


def _expect_month( month ):
    if isinstance( month, Month ):
        return month
    _expect( "month", month, Month.JANUARY.value, Month.DECEMBER.value )
    return Month( month )


def _expect_date( year, month, day ):
    _expect( "year", year, MIN_YEAR, MAX_YEAR )
    month			= _expect_month( month )
    _expect( "day", day, 1, days_in_month( month, year ))
    return month


def _expect_time( hour, minute, second, millisecond ):
    _expect( "hour", hour, 0, HOURS_PER_DAY - 1 )
    _expect( "minute", minute, 0, MINUTES_PER_HOUR - 1 )
    _expect( "second", second, 0, 59 )
    _expect( "millisecond", millisecond, 0, MILLISECONDS_PER_SECOND - 1 )


def _expect_zone( timezone ):
    if timezone is None:
        return UTC
    if not isinstance( timezone, TimeZone ):
        raise ValueError( "Expected a TimeZone, found %r" % ( timezone, ))
    return timezone


def _carry_days( year, month, day, days ):
    """Roll the date forward (or back) by a number of days, one at a time; a day is only ever
    carried in or out by the DST correction, so this never walks far.

    """
    while days > 0:
        days		       -= 1
        day		       += 1
        if day > days_in_month( month, year ):
            day			= 1
            month		= month.next()
            if month is Month.JANUARY:
                year	       += 1
    while days < 0:
        days		       += 1
        day		       -= 1
        if day < 1:
            month		= month.previous()
            if month is Month.DECEMBER:
                year	       -= 1
            day			= days_in_month( month, year )
    return year, month, day


def _with_saving( fields, saving ):
    """Apply a DST saving (in minutes) to standard-time fields, carrying into the hour, day, month
    and year as required.

    """
    hours,minute		= divmod( fields.minute + saving, MINUTES_PER_HOUR )
    days,hour			= divmod( fields.hour + hours, HOURS_PER_DAY )
    year,month,day		= _carry_days( fields.year, fields.month, fields.day, days )
    return Fields( year, month, day, hour, minute, fields.second, fields.millisecond )


class DateTime:
    """A point in time on the Gregorian calendar, precise to 1ms, as seen from a TimeZone.

    The instant is always held as the (signed) count of milliseconds since 1970-01-01 00:00:00.000
    UTC.  The Gregorian fields (year, month, ...) of the wall-clock time in the zone are computed
    from it the first time any is requested, and retained.  Objects are immutable; all the with_...,
    add_... and subtract_... methods return a new DateTime.

    Comparisons (is_before, ==, <, ...) are between instants, regardless of zone; the is_in_same_...
    family compares the wall-clock fields, each in its own zone.

    """
    __slots__			= ( '_ms', '_zone', '_fields' )

    def __init__( self, year, month, day, hour=0, minute=0, second=0, millisecond=0, timezone=None ):
        month			= _expect_date( year, month, day )
        _expect_time( hour, minute, second, millisecond )
        self._zone		= _expect_zone( timezone )
        self._ms		= self._milliseconds( self._zone, year, month, day, hour, minute, second, millisecond )
        self._fields		= None

    @staticmethod
    def _milliseconds( zone, year, month, day, hour, minute, second, millisecond ):
        """The instant of wall-clock fields in zone.  The zone's offset is evaluated against the very
        fields being converted, since the instant isn't yet known.

        """
        local			= milliseconds_from_fields( year, month, day, hour, minute, second, millisecond )
        return local - zone.offset_for( year, month, day, hour ).offset_milliseconds()

    @classmethod
    def _instant( cls, milliseconds, timezone=None ):
        """A DateTime at the instant, provided its wall-clock time in the zone lies within the years
        MIN_YEAR to MAX_YEAR; MIN/MAX_MILLISECONDS bound that wall-clock time as if it were UTC.

        """
        zone			= _expect_zone( timezone )
        # No offset reaches a day, so the instant must lie within a day of the bounds
        _expect( "milliseconds", milliseconds,
                 cls.MIN_MILLISECONDS - MILLISECONDS_PER_DAY, cls.MAX_MILLISECONDS + MILLISECONDS_PER_DAY )
        local			= milliseconds + zone.offset_at( milliseconds ).offset_milliseconds()
        if not cls.MIN_MILLISECONDS <= local <= cls.MAX_MILLISECONDS:
            raise ValueError( "Expected a time within years %d to %d in %s, found %d milliseconds" % (
                MIN_YEAR, MAX_YEAR, zone.name, milliseconds ))
        self			= cls.__new__( cls )
        self._ms		= milliseconds
        self._zone		= zone
        self._fields		= None
        return self

    @classmethod
    def from_unix_timestamp( cls, seconds, timezone=None ):
        """From seconds since the UNIX epoch; 0 milliseconds."""
        return cls._instant( int( seconds ) * MILLISECONDS_PER_SECOND, timezone )

    @classmethod
    def from_unix_timestamp_ms( cls, milliseconds, timezone=None ):
        return cls._instant( int( milliseconds ), timezone )

    @classmethod
    def now( cls, timezone=None ):
        return cls._instant( int( timer() * MILLISECONDS_PER_SECOND ), timezone )

    @classmethod
    def from_datetime( cls, dt ):
        """From a Python datetime; a naive datetime is taken to be UTC.  The result is in UTC."""
        if dt.tzinfo is None or dt.utcoffset() is None:
            dt			= dt.replace( tzinfo=datetime.timezone.utc )
        return cls._instant(( dt - cls._EPOCH_DATETIME ) // datetime.timedelta( milliseconds=1 ))

    _EPOCH_DATETIME		= datetime.datetime( 1970, 1, 1, tzinfo=datetime.timezone.utc )

    def to_datetime( self ):
        """An aware Python datetime of the same wall-clock time and offset (years 1-9999 only)."""
        fields			= self._gregorian()
        if fields.year < datetime.MINYEAR:
            raise ValueError( "Expected year between %d and %d inclusive, found %d" % (
                datetime.MINYEAR, datetime.MAXYEAR, fields.year ))
        offset			= self._zone.offset_at( self._ms )
        tzinfo			= datetime.timezone(
            datetime.timedelta( milliseconds=offset.offset_milliseconds() ), self._zone.name )
        return datetime.datetime(
            fields.year, fields.month.value, fields.day, fields.hour, fields.minute, fields.second,
            fields.millisecond * 1000, tzinfo=tzinfo )

    # Gregorian fields, computed from the instant on demand.  The DST correction is applied after
    # converting at the zone's standard offset, so that the rule in effect is judged unambiguously.
    def _gregorian( self ):
        if self._fields is None:
            fields		= fields_from_milliseconds( self._ms + self._zone.standard_offset.offset_milliseconds() )
            transition		= self._zone.transition_for( fields.year, fields.month, fields.day, fields.hour )
            if transition is not None and transition.saving_minutes:
                fields		= _with_saving( fields, transition.saving_minutes )
            self._fields	= fields
        return self._fields

    @property
    def year( self ):
        return self._gregorian().year

    @property
    def month( self ):
        return self._gregorian().month

    @property
    def day( self ):
        return self._gregorian().day

    @property
    def hour( self ):
        return self._gregorian().hour

    @property
    def minute( self ):
        return self._gregorian().minute

    @property
    def second( self ):
        return self._gregorian().second

    @property
    def millisecond( self ):
        return self._gregorian().millisecond

    @property
    def weekday( self ):
        """The day of the week of the instant's UTC date; the zone is not consulted."""
        return EPOCH_WEEKDAY.advance(( self._ms // MILLISECONDS_PER_DAY ) % DAYS_PER_WEEK )

    @property
    def timezone( self ):
        return self._zone

    @property
    def unix_timestamp( self ):
        return self._ms // MILLISECONDS_PER_SECOND

    @property
    def unix_timestamp_ms( self ):
        return self._ms

    def fields( self ):
        """All the wall-clock Fields( year, month, day, hour, minute, second, millisecond )."""
        return self._gregorian()

    # Derivation.  Each replaces some wall-clock fields, and finds the instant they denote in the zone.
    def _replace( self, **kwds ):
        fields			= self._gregorian()._replace( **kwds )
        return self.__class__( *fields, timezone=self._zone )

    def with_date( self, year, month, day ):
        return self._replace( year=year, month=month, day=day )

    def with_time( self, hour, minute, second=0, millisecond=0 ):
        return self._replace( hour=hour, minute=minute, second=second, millisecond=millisecond )

    def with_hour( self, hour ):
        return self._replace( hour=hour )

    def with_minute( self, minute ):
        return self._replace( minute=minute )

    def with_second( self, second ):
        return self._replace( second=second )

    def with_millisecond( self, millisecond ):
        return self._replace( millisecond=millisecond )

    def with_time_zone( self, timezone ):
        """The same instant, seen from another zone."""
        return self._instant( self._ms, timezone )

    # Arithmetic.  Units of an hour or less (and any timedelta) move the instant, so are immune to DST
    # changes.  Days, months and years move the wall-clock date, keeping the time of day.
    def add( self, delta ):
        """Add a datetime.timedelta, truncated to the millisecond."""
        return self.add_milliseconds( delta // datetime.timedelta( milliseconds=1 ))

    def subtract( self, delta ):
        return self.add_milliseconds( -( delta // datetime.timedelta( milliseconds=1 )))

    def add_milliseconds( self, milliseconds ):
        return self._instant( self._ms + milliseconds, self._zone )

    def add_seconds( self, seconds ):
        return self.add_milliseconds( seconds * MILLISECONDS_PER_SECOND )

    def add_minutes( self, minutes ):
        return self.add_milliseconds( minutes * MILLISECONDS_PER_MINUTE )

    def add_hours( self, hours ):
        return self.add_milliseconds( hours * MILLISECONDS_PER_HOUR )

    def add_days( self, days ):
        fields			= self._gregorian()
        date			= fields_from_milliseconds(
            milliseconds_from_fields( fields.year, fields.month, fields.day ) + days * MILLISECONDS_PER_DAY )
        return self._replace( year=date.year, month=date.month, day=date.day )

    def add_months( self, months ):
        """Add calendar months; a day past the end of the resulting month is clamped to its last day
        (eg. Jan 31 + 1 month is Feb 28, or 29 in a leap year).

        """
        fields			= self._gregorian()
        year,month		= divmod( fields.year * MONTHS_PER_YEAR + fields.month.value - 1 + months,
                                          MONTHS_PER_YEAR )
        _expect( "year", year, MIN_YEAR, MAX_YEAR )
        month			= Month( month + 1 )
        return self._replace( year=year, month=month, day=min( fields.day, days_in_month( month, year )))

    def add_years( self, years ):
        return self.add_months( years * MONTHS_PER_YEAR )

    def subtract_milliseconds( self, milliseconds ):
        return self.add_milliseconds( -milliseconds )

    def subtract_seconds( self, seconds ):
        return self.add_seconds( -seconds )

    def subtract_minutes( self, minutes ):
        return self.add_minutes( -minutes )

    def subtract_hours( self, hours ):
        return self.add_hours( -hours )

    def subtract_days( self, days ):
        return self.add_days( -days )

    def subtract_months( self, months ):
        return self.add_months( -months )

    def subtract_years( self, years ):
        return self.add_years( -years )

    # Comparison of instants
    def is_before( self, other ):
        return self._ms < other.unix_timestamp_ms

    def is_after( self, other ):
        return self._ms > other.unix_timestamp_ms

    def is_equal_to( self, other ):
        return self._ms == other.unix_timestamp_ms

    # Comparison of wall-clock fields, each at successively finer granularity
    def _same( self, other, count ):
        return self._gregorian()[:count] == tuple( other.fields() )[:count]

    def is_in_same_year_as( self, other ):
        return self._same( other, 1 )

    def is_in_same_month_as( self, other ):
        return self._same( other, 2 )

    def is_in_same_day_as( self, other ):
        return self._same( other, 3 )

    is_on_same_day_as		= is_in_same_day_as

    def is_in_same_hour_as( self, other ):
        return self._same( other, 4 )

    def is_in_same_minute_as( self, other ):
        return self._same( other, 5 )

    def is_in_same_second_as( self, other ):
        return self._same( other, 6 )

    def __lt__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return self.is_before( rhs )
    def __gt__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return self.is_after( rhs )
    def __le__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return not self.is_after( rhs )
    def __ge__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return not self.is_before( rhs )
    def __eq__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return self.is_equal_to( rhs )
    def __ne__( self, rhs ):
        if not isinstance( rhs, DateTime ):
            return NotImplemented
        return not self.is_equal_to( rhs )

    def __hash__( self ):
        return hash( self._ms )

    # Add/subtract timedeltas; subtracting DateTimes yields the timedelta between their instants
    def __add__( self, rhs ):
        if not isinstance( rhs, datetime.timedelta ):
            return NotImplemented
        return self.add( rhs )
    __radd__			= __add__

    def __sub__( self, rhs ):
        if isinstance( rhs, DateTime ):
            return datetime.timedelta( milliseconds=self._ms - rhs._ms )
        if not isinstance( rhs, datetime.timedelta ):
            return NotImplemented
        return self.subtract( rhs )

    def __str__( self ):
        f			= self._gregorian()
        result			= "%04d-%02d-%02d %02d:%02d:%02d.%03d" % (
            f.year, f.month.value, f.day, f.hour, f.minute, f.second, f.millisecond )
        if self._zone is not UTC:
            result	       += ' ' + self._zone.name
        return result

    def __repr__( self ):
        return '<%s =~= %d>' % ( self, self._ms )


# The instants (in UTC) of the first and last representable milliseconds
DateTime.MIN_MILLISECONDS	= milliseconds_from_fields( MIN_YEAR, Month.JANUARY, 1 )
DateTime.MAX_MILLISECONDS	= milliseconds_from_fields( MAX_YEAR, Month.DECEMBER, 31, 23, 59, 59, 999 )
