
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

__all__				= [ "ZoneProvider", "zone_from_pytz", "zone_names" ]

import datetime
import logging
import os
import threading

# Installed packages (eg. pip/setup.py install pytz tzlocal)
import pytz
import tzlocal

from .		import defaults
from .gregorian		import Month, Weekday, days_in_month, DAYS_PER_WEEK
from .misc		import mutexmethod, lazystr
from .offset		import UtcOffset, InvalidFormatError
from .transition	import TransitionRule, LastWeekday, NthWeekday
from .zone		import TimeZone, UTC

log				= logging.getLogger( __package__ )


def zone_names( region ):
    """Yields all zone names matching region, which may be a single identifier string or iterable.  If
    unrecognized, the supplied region is yielded unmodified.  The pytz {country,common}_timezones
    are consulted; the provided <region> strings may be country codes, or may match the leading
    <region> portion of <region>/<city> timezone names.

    """
    if isinstance( region, str ):
        region			= [ region ]
    elif region is None:
        region			= []
    for r in region:						# eg. [ 'CA', 'Canada', 'Europe/Berlin' ]
        zones			= pytz.country_timezones.get( r )	# eg 'CA'
        if zones is None:
            zones		= [ z for z in pytz.common_timezones	# eg. 'Canada/Mountain' or 'Europe'
                                    if z.startswith( r ) ]
        if zones:
            for z in zones:
                yield z
        else:
            yield r


def _minutes( delta ):
    return int( round( delta.total_seconds() / 60 ))


def _selectors( year, month, day ):
    """All the ways of naming a day of the month: the fixed day, the nth and/or the last weekday."""
    weekday			= Weekday( datetime.date( year, month.value, day ).weekday() )
    candidates			= { day }
    if day + DAYS_PER_WEEK > days_in_month( month, year ):
        candidates.add( LastWeekday( weekday ))
    nth				= ( day - 1 ) // DAYS_PER_WEEK + 1
    if nth <= 4:
        candidates.add( NthWeekday( nth, weekday ))
    return candidates


def _select( run ):
    """The best day selector consistent with every year of the run."""
    if run['from'] == run['to']:
        return run['day']
    for kind in ( LastWeekday, NthWeekday ):
        for c in run['selectors']:
            if isinstance( c, kind ):
                return c
    return run['day']


def _rebalance( prior, run ):
    """Move the prior run's final years into the following run, while they fit its day selector."""
    best			= _select( run )
    while prior['years'] and best in prior['years'][-1][2]:
        year,day,selectors	= prior['years'].pop()
        run['years'].insert( 0, ( year, day, selectors ))
        run['from'],run['day']	= year,day
        run['selectors']       &= selectors
    if prior['years']:
        prior['to']		= prior['years'][-1][0]
        prior['selectors']	= set.intersection( *( s for _,_,s in prior['years'] ))


def zone_from_pytz( name, horizon=None ):
    """Build a TimeZone from the pytz (IANA tz database) zone of the given name; raises
    pytz.UnknownTimeZoneError if there is no such zone.

    The zone's standard offset is its final standard (non-DST) offset.  Each transition in the pytz
    data becomes a rule, taking effect at the local standard time of the transition, with a saving of
    the transition's UTC offset less the standard offset (so historical changes of standard offset are
    also represented).  Transitions in consecutive years having the same month, hour and saving, and a
    consistent day (eg. the last Sunday) are coalesced into one rule.  The pytz data usually runs out
    at some year (eg. 2037); rules that reach that final year are presumed to be ongoing, if the final
    year is at or past the horizon.

    """
    if horizon is None:
        horizon			= defaults.zone_horizon
    tzinfo			= pytz.timezone( name )
    transition_times		= getattr( tzinfo, '_utc_transition_times', None )
    if not transition_times:
        # A static zone (eg. 'Etc/GMT+5' or UTC)
        offset			= UtcOffset.from_minutes( _minutes( tzinfo.utcoffset( datetime.datetime( 2000, 1, 1 ))))
        log.detail( "%-30s: Loaded fixed offset %s", name, offset )
        return TimeZone( name, offset )

    utcoffset,dst,_		= tzinfo._transition_info[-1]
    standard			= utcoffset - dst

    # Each transition (the first is a placeholder, for the zone's initial offset) as local standard
    # time, in chronological order.  Coalesce each into a run of prior years' matching transitions.
    runs			= []
    active			= {}
    for when,( utcoffset,_,abbrev ) in zip( transition_times[1:], tzinfo._transition_info[1:] ):
        local			= when + standard
        saving			= _minutes( utcoffset - standard )
        if local.minute or local.second:
            log.detail( "%-30s: Transition at %s %s truncated to %02d:00 standard time",
                        name, local, abbrev, local.hour )
        month			= Month( local.month )
        key			= ( month, local.hour, saving )
        selectors		= _selectors( local.year, month, local.day )
        run			= active.get( key )
        if run and run['to'] + 1 == local.year and run['selectors'] & selectors:
            run['to']		= local.year
            run['selectors']   &= selectors
            run['years'].append(( local.year, local.day, selectors ))
            continue
        run			= { 'key': key, 'day': local.day, 'selectors': selectors,
                                    'from': local.year, 'to': local.year,
                                    'years': [ ( local.year, local.day, selectors ) ] }
        active[key]		= run
        runs.append( run )

    # The trailing years of a run may also fit the day of the rule in effect at the end of the data;
    # they belong to that final rule
    final			= max( r['to'] for r in runs )
    previous			= {}
    for run in runs:
        prior			= previous.get( run['key'] )
        if prior and run['from'] < run['to'] == final and prior['to'] + 1 == run['from']:
            _rebalance( prior, run )
        previous[run['key']]	= run
    runs			= [ r for r in runs if r['years'] ]

    transitions			= []
    for run in runs:
        month,hour,saving	= run['key']
        to_year			= run['to']
        if to_year == final >= horizon and run['from'] < to_year:
            to_year		= TransitionRule.ONGOING
        transitions.append( TransitionRule( run['from'], to_year, month, _select( run ), hour, saving ))

    zone			= TimeZone( name, UtcOffset.from_minutes( _minutes( standard )), transitions )
    log.detail( "%-30s: Loaded %s from %d transitions, as %d rules",
                name, zone.standard_offset, len( transition_times ) - 1, len( transitions ))
    log.trace( "%-30s: %s", name, lazystr( lambda: "\n    ".join( [ "" ] + [ repr( t ) for t in transitions ] )))
    return zone


class ZoneProvider:
    """Looks up TimeZones by name ('UTC', an offset like '+05:30', or an IANA zone name such as
    'Europe/London'), caching each.  Hand-built zones may be registered under their own names.

    """
    def __init__( self, default=None, horizon=None ):
        self.lock		= threading.Lock()
        self._zones		= { UTC.name: UTC }
        self._default		= default or defaults.zone_default
        self._horizon		= defaults.zone_horizon if horizon is None else horizon

    @classmethod
    def from_config( cls, files=None, section=None ):
        """A ZoneProvider configured from the [Zones] section of the given (or the default) config
        files: 'default' names the default zone (or 'local', for the host's zone), and 'horizon' is
        the year past which zone data is presumed to continue.

        """
        if section is None:
            section		= defaults.zone_section
        config			= defaults.config_loader()
        loaded			= config.read( defaults.config_files if files is None else files )
        log.normal( "Loaded config files: %r", loaded )
        zones			= config[section] if section in config else config['DEFAULT']
        horizon			= zones.get( 'horizon' )
        return cls( default=zones.get( 'default' ), horizon=None if horizon is None else int( horizon ))

    @property
    def horizon( self ):
        return self._horizon

    @mutexmethod( 'lock' )
    def register( self, zone ):
        if not isinstance( zone, TimeZone ):
            raise ValueError( "Expected a TimeZone, found %r" % ( zone, ))
        log.detail( "%-30s: Registered %r", zone.name, zone )
        self._zones[zone.name]	= zone
        return zone

    @mutexmethod( 'lock' )
    def lookup( self, name ):
        """The named zone; an offset like '-05:30', or a pytz zone name.  Raises
        pytz.UnknownTimeZoneError if no such zone is known.

        """
        zone			= self._zones.get( name )
        if zone is None:
            if name[:1] in ( '+', '-' ):
                zone		= TimeZone.parse( name )
            else:
                zone		= zone_from_pytz( name, horizon=self._horizon )
            self._zones[name]	= zone
        return zone

    def parse( self, text ):
        """A zone from text: an offset '+HH:MM', '+HHMM', or a zone name."""
        if text[:1] in ( '+', '-' ):
            return TimeZone.parse( text )
        try:
            return self.lookup( text )
        except pytz.UnknownTimeZoneError as exc:
            raise InvalidFormatError( 'Expected valid timezone name or offset, found "%s"' % ( text )) from exc

    def local( self ):
        """The host's zone.  A TZ environment variable naming a zone is respected; otherwise, tzlocal
        deduces it from the host's configuration.

        """
        name			= os.environ.get( 'TZ' )
        if not name or os.path.exists( name ):
            name		= tzlocal.get_localzone_name()
        return self.lookup( name or UTC.name )

    def default( self ):
        if self._default == 'local':
            return self.local()
        return self.lookup( self._default )

    def names( self, region ):
        return list( zone_names( region ))
