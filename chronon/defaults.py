
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
chronon.defaults -- System-wide default (global) values

"""
__all__				= [ 'zone_default', 'zone_horizon', 'zone_section',
                                    'config_name', 'config_paths', 'config_files', 'config_loader' ]

import configparser
import os

zone_default			= 'UTC'		# Zone of DateTimes created without one, unless configured
zone_horizon			= 2037		# Zone data reaching this year is presumed to continue

# Define the default paths used for configuration files, etc.
zone_section			= 'Zones'
config_name			= 'chronon.cfg'	# Default Chronon application configuration file

def config_paths( filename, extra=None ):
    """Yield the Chronon configuration search paths in *reverse* order of precedence (furthest or
    most general, to nearest or most specific).

    This is the order that is required by configparser; settings configured in "later" files
    override those in "earlier" ones.

    """
    yield os.path.join( os.path.dirname( __file__ ), '..', filename )		# chronon installation root dir
    yield os.path.join( os.getenv( 'APPDATA', os.sep + 'etc' ), filename )	# global app data dir, eg. /etc/
    yield os.path.join( os.path.expanduser( '~' ), '.chronon', filename )	# user dir, ~username/.chronon/name
    yield os.path.join( os.path.expanduser( '~' ), '.' + filename )		# user dir, ~username/.name
    for e in extra or []:							# any extra dirs...
        yield os.path.join( e, filename )
    yield filename								# current dir (most specific)

# Default Chronon configuration files path, In 'configparser' expected order (most general to most specific)
config_files			= list( config_paths( config_name ))


def config_loader():
    """A ConfigParser accepting '#' comments (also at end of line), and ${section:option} references."""
    return configparser.ConfigParser(
        comment_prefixes=('#',), inline_comment_prefixes=('#',),
        allow_no_value=True, empty_lines_in_values=False,
        interpolation=configparser.ExtendedInterpolation() )
