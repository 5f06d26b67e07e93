import pytest

from .offset import UtcOffset, InvalidFormatError


def test_offset_render():
    off				= UtcOffset( -5, -30 )
    assert off.offset( True ) == "-05:30"
    assert off.offset() == "-0530"
    assert off.offset_seconds() == -19800
    assert off.offset_milliseconds() == -19800000
    assert off.total_minutes() == -330
    assert str( off ) == "-05:30"
    assert repr( off ) == "<UtcOffset -05:30>"

    assert UtcOffset( 0, -30 ).offset( True ) == "-00:30"
    assert UtcOffset( -3 ).offset() == "-0300"
    assert UtcOffset( 0 ).offset( colon=True ) == "+00:00"
    assert UtcOffset( 14 ).offset() == "+1400"
    assert UtcOffset( 5, 45 ).offset_milliseconds() == 20700000


def test_offset_invalid():
    with pytest.raises( ValueError ) as exc:
        UtcOffset( 5, -30 )
    assert "Expected hours and minutes with compatible signs, found 5 and -30" in str( exc.value )
    with pytest.raises( ValueError ) as exc:
        UtcOffset( -1, 15 )
    assert "found -1 and 15" in str( exc.value )
    with pytest.raises( ValueError ) as exc:
        UtcOffset( 1, 60 )
    assert "Expected minutes between -59 and 59 inclusive, found 60" in str( exc.value )
    with pytest.raises( ValueError ):
        UtcOffset( 0, -60 )


def test_offset_parse():
    assert UtcOffset.parse( "+05:30" ) == UtcOffset( 5, 30 )
    assert UtcOffset.parse( "-0330" ) == UtcOffset( -3, -30 )
    assert UtcOffset.parse( "-00:30" ) == UtcOffset( 0, -30 )
    assert UtcOffset.parse( "+0000" ) == UtcOffset( 0 )
    for off in ( UtcOffset( -5, -30 ), UtcOffset( 0, 45 ), UtcOffset( 12 ), UtcOffset( 0, -15 )):
        assert UtcOffset.parse( off.offset() ) == off
        assert UtcOffset.parse( off.offset( colon=True )) == off

    for bad in ( "0530", "+5:30", "+05:3", "+05-30", " +05:30", "+05:30 ", "", "UTC",
                 "+05:30\n", "+\u0665\u0660:\u0663\u0660" ):
        with pytest.raises( InvalidFormatError ) as exc:
            UtcOffset.parse( bad )
        assert '"%s"' % bad in str( exc.value )
    # Parses, but the minutes are out of range
    with pytest.raises( ValueError ):
        UtcOffset.parse( "+01:60" )
    assert issubclass( InvalidFormatError, ValueError )


def test_offset_from_minutes():
    assert UtcOffset.from_minutes( -330 ) == UtcOffset( -5, -30 )
    assert UtcOffset.from_minutes( 90 ) == UtcOffset( 1, 30 )
    assert UtcOffset.from_minutes( -30 ) == UtcOffset( 0, -30 )
    assert UtcOffset.from_minutes( 0 ) == UtcOffset( 0 )
    for minutes in range( -900, 900, 15 ):
        assert UtcOffset.from_minutes( minutes ).total_minutes() == minutes


def test_offset_value():
    assert UtcOffset( 1, 0 ) == UtcOffset( 1 )
    assert UtcOffset( 1, 0 ) != UtcOffset( -1 )
    assert hash( UtcOffset( -5, -30 )) == hash( UtcOffset.parse( "-05:30" ))
    assert len( { UtcOffset( 2 ), UtcOffset.from_minutes( 120 ), UtcOffset( 0, 0 ) } ) == 2
    off				= UtcOffset( 3, 30 )
    assert ( off.hours, off.minutes ) == ( 3, 30 )
