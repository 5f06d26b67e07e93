import pytest

from .formatter import StrftimeFormatter
from .gregorian import Month, Weekday, Fields, milliseconds_from_fields
from .offset import UtcOffset
from .times import DateTime
from .transition import TransitionRule, LastWeekday
from .zone import TimeZone

LONDON				= TimeZone( "Test/London", UtcOffset( 0 ), [
    TransitionRule( 1996, TransitionRule.ONGOING, Month.MARCH,   LastWeekday( Weekday.SUNDAY ), 1, 60 ),
    TransitionRule( 1996, TransitionRule.ONGOING, Month.OCTOBER, LastWeekday( Weekday.SUNDAY ), 1,  0 ),
] )


def test_formatter_format():
    fmt				= StrftimeFormatter()
    assert fmt.format( DateTime( 1993, 3, 9 ), "%Y" ) == "1993"
    assert fmt.format( DateTime( 2012, 8, 14 ), "%y" ) == "12"
    assert fmt.format( DateTime( 1991, 3, 14 ), "%m" ) == "03"
    assert fmt.format( DateTime( 1945, 8, 5 ), "%d" ) == "05"
    assert fmt.format( DateTime( 1996, 5, 6 ), "%A" ) == "Monday"
    assert fmt.format( DateTime( 1987, 8, 2 ), "%a %w" ) == "Sun 0"
    assert fmt.format( DateTime( 2001, 2, 3, 4, 5, 6, 7 ), "%Y-%m-%d %H:%M:%S.%f" ) \
        == "2001-02-03 04:05:06.007000"

    dt				= DateTime( 2024, 7, 1, 12, 30, timezone=LONDON )
    assert fmt.format( dt, "%H:%M %z %Z" ) == "12:30 +0100 Test/London"
    assert fmt.format( dt.with_date( 2024, 1, 1 ), "%H:%M %z" ) == "12:30 +0000"
    assert fmt.format( DateTime( 2024, 1, 1, timezone=TimeZone.parse( "-05:30" )), "%z" ) == "-0530"

    with pytest.raises( ValueError ):
        fmt.format( DateTime( -103, 4, 5 ), "%Y" )


def test_formatter_parse():
    fmt				= StrftimeFormatter()
    dt				= fmt.parse( "2001-10-23 22:01:19.170", "%Y-%m-%d %H:%M:%S.%f" )
    assert dt.fields() == Fields( 2001, Month.OCTOBER, 23, 22, 1, 19, 170 )
    assert dt.timezone.name == "UTC"

    # Wall-clock time in the supplied zone
    dt				= fmt.parse( "2024-07-01 12:00", "%Y-%m-%d %H:%M", timezone=LONDON )
    assert dt.timezone is LONDON
    assert dt.unix_timestamp_ms == milliseconds_from_fields( 2024, 7, 1, 11 )

    # An explicit offset yields a fixed-offset zone
    dt				= fmt.parse( "2001-10-23 22:01:19.170 +0400", "%Y-%m-%d %H:%M:%S.%f %z" )
    assert dt.unix_timestamp_ms == 1003860079170
    assert dt.timezone.standard_offset == UtcOffset( 4 )
    assert dt.timezone.name == "+04:00"
    dt				= fmt.parse( "2001-03-23 22:01:19.170 -03:30", "%Y-%m-%d %H:%M:%S.%f %z", timezone=LONDON )
    assert dt.unix_timestamp_ms == 985397479170
    assert dt.hour == 22

    # Microseconds are truncated
    assert fmt.parse( "12:00:00.999999", "%H:%M:%S.%f" ).millisecond == 999

    with pytest.raises( ValueError ):
        fmt.parse( "2001-02-30", "%Y-%m-%d" )
    with pytest.raises( ValueError ):
        fmt.parse( "yesterday", "%Y-%m-%d" )

    # Round trip
    dt				= DateTime( 2024, 10, 27, 0, 59, 59, 999, timezone=LONDON )
    text			= fmt.format( dt, "%Y-%m-%d %H:%M:%S.%f %z" )
    assert text == "2024-10-27 00:59:59.999000 +0100"
    assert fmt.parse( text, "%Y-%m-%d %H:%M:%S.%f %z" ) == dt
