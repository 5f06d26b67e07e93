import pytest

from .gregorian import Month, Weekday, milliseconds_from_fields
from .offset import UtcOffset, InvalidFormatError
from .transition import TransitionRule, LastWeekday
from .zone import TimeZone, UTC

# A zone like Europe/London since 1996: BST from 01:00 GMT on the last Sunday in March, 'til 01:00
# GMT on the last Sunday in October.
SUMMER				= TransitionRule( 1996, TransitionRule.ONGOING, Month.MARCH,
                                                  LastWeekday( Weekday.SUNDAY ), 1, 60 )
WINTER				= TransitionRule( 1996, TransitionRule.ONGOING, Month.OCTOBER,
                                                  LastWeekday( Weekday.SUNDAY ), 1, 0 )
LONDON				= TimeZone( "Test/London", UtcOffset( 0 ), [ WINTER, SUMMER ] )


def test_zone_fixed():
    assert UTC.name == "UTC"
    assert not UTC.has_transitions()
    assert UTC.offset_at( 123456789 ) == UtcOffset( 0 )
    assert UTC.transition_for( 2024, 7, 1, 12 ) is None
    assert UTC.current_offset() == UtcOffset( 0 )

    kolkata			= TimeZone.parse( "+05:30" )
    assert kolkata.name == "+05:30"
    assert str( kolkata ) == "+05:30"
    assert kolkata.standard_offset == UtcOffset( 5, 30 )
    assert kolkata.offset_for( 2024, Month.JULY, 1, 12 ) == UtcOffset( 5, 30 )
    assert kolkata.offset_at( -1 ) == UtcOffset( 5, 30 )
    assert kolkata.transitions == ()

    with pytest.raises( InvalidFormatError ):
        TimeZone.parse( "India" )
    with pytest.raises( ValueError ):
        TimeZone( "Bad", "+01:00" )
    with pytest.raises( ValueError ):
        TimeZone( "Bad", UtcOffset( 1 ), [ "+02:00" ] )


def test_zone_transitions_for():
    assert LONDON.has_transitions()
    assert LONDON.transitions == ( WINTER, SUMMER )
    # Ordered by occurrence within the year, not by declaration
    assert LONDON.transitions_for( 2024 ) == [ SUMMER, WINTER ]
    assert LONDON.transitions_for( 1995 ) == []


def test_zone_transition_for():
    assert LONDON.transition_for( 2024, Month.JULY, 1, 12 ) is SUMMER
    assert LONDON.transition_for( 2024, Month.MARCH, 31, 0 ) is WINTER	# before the change (prior year's)
    assert LONDON.transition_for( 2024, Month.MARCH, 31, 1 ) is SUMMER
    assert LONDON.transition_for( 2024, Month.OCTOBER, 27, 0 ) is SUMMER
    assert LONDON.transition_for( 2024, Month.OCTOBER, 27, 1 ) is WINTER
    assert LONDON.transition_for( 2024, Month.DECEMBER, 31, 23 ) is WINTER
    assert LONDON.transition_for( 2024, 1, 15, 0 ) is WINTER

    # Before any rule applies, standard time
    assert LONDON.transition_for( 1995, Month.JULY, 1, 0 ) is None
    assert LONDON.transition_for( 1996, Month.JANUARY, 1, 0 ) is None
    assert LONDON.transition_for( 1996, Month.APRIL, 1, 0 ) is SUMMER

    assert LONDON.offset_for( 2024, Month.JULY, 1, 12 ) == UtcOffset( 1 )
    assert LONDON.offset_for( 2024, Month.JANUARY, 1, 12 ) == UtcOffset( 0 )


def test_zone_transition_prior_year():
    # DST 'til 2010, then permanent summer time adopted from 2011 on
    permanent			= TransitionRule( 2011, 2011, Month.MARCH, 27, 1, 60 )
    zone			= TimeZone( "Test/Permanent", UtcOffset( 3 ), [
        TransitionRule( 2000, 2010, Month.MARCH, LastWeekday( Weekday.SUNDAY ), 2, 60 ),
        TransitionRule( 2000, 2010, Month.OCTOBER, LastWeekday( Weekday.SUNDAY ), 2, 0 ),
        permanent,
    ] )
    assert zone.transition_for( 2011, Month.JANUARY, 1, 0 ).month is Month.OCTOBER
    assert zone.transition_for( 2011, Month.JULY, 1, 0 ) is permanent
    assert zone.transition_for( 2020, Month.JANUARY, 1, 0 ) is permanent
    assert zone.offset_for( 2020, Month.DECEMBER, 1, 0 ) == UtcOffset( 4 )
    assert zone.transition_for( 1999, Month.JULY, 1, 0 ) is None


def test_zone_transition_at():
    # 01:00 UTC (GMT) on the last Sunday of March, 2024 is when BST begins
    change			= milliseconds_from_fields( 2024, Month.MARCH, 31, 1 )
    assert LONDON.transition_at( change - 1 ) is WINTER
    assert LONDON.transition_at( change ) is SUMMER
    assert LONDON.offset_at( change - 1 ) == UtcOffset( 0 )
    assert LONDON.offset_at( change ) == UtcOffset( 1 )

    # BST ends at 01:00 GMT (02:00 BST) on the last Sunday of October
    change			= milliseconds_from_fields( 2024, Month.OCTOBER, 27, 1 )
    assert LONDON.offset_at( change - 1 ) == UtcOffset( 1 )
    assert LONDON.offset_at( change ) == UtcOffset( 0 )

    class At:
        unix_timestamp_ms	= milliseconds_from_fields( 2024, Month.JULY, 1, 11 )
    assert LONDON.offset( At ) == UtcOffset( 1 )
    assert LONDON.effective_transition( At ) is SUMMER


def test_zone_value():
    same			= TimeZone( "Test/London", UtcOffset( 0 ), [ WINTER, SUMMER ] )
    assert same == LONDON
    assert hash( same ) == hash( LONDON )
    assert TimeZone( "Test/London", UtcOffset( 0 ), [ SUMMER, WINTER ] ) != LONDON
    assert TimeZone( "UTC", UtcOffset( 0 )) == UTC
    assert repr( LONDON ) == "<TimeZone Test/London +00:00, 2 transitions>"
    assert repr( UTC ) == "<TimeZone UTC +00:00>"
