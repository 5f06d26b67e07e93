from setuptools import setup

import os

HERE				= os.path.dirname( os.path.abspath( __file__ ))

__version__			= None
__version_info__		= None
exec( open( os.path.join( HERE, 'chronon', 'version.py' ), 'r' ).read() )

# Build the install options.  The IANA tz database is supplied by pytz, and the host's zone by tzlocal

install_requires		= [
    # Remove whitespace, elide blank lines and comments
    ''.join( r.split() )
    for r in open( os.path.join( HERE, "requirements.txt" )).readlines()
    if r.strip() and not r.strip().startswith( '#' )
]
tests_require			= [
    ''.join( r.split() )
    for r in open( os.path.join( HERE, "requirements-tests.txt" )).readlines()
    if r.strip() and not r.strip().startswith( '#' )
]

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

package_dir			= {
    "chronon":			"chronon",
}

long_description		= """\
Chronon represents precise points in time on the proleptic Gregorian calendar,
to millisecond resolution, for the years -9999 to 9999.

Each DateTime is an instant (milliseconds since the UNIX epoch) seen from a
TimeZone: a standard offset from UTC, and the annual TransitionRules that move
the zone into and out of daylight saving time.  The wall-clock fields of a
DateTime are computed from its instant as required.  Calendar arithmetic (days,
months and years) operates on the wall-clock fields; arithmetic in hours and
less operates on the instant.

Zones may be built by hand, or loaded by name from the IANA tz database via
pytz; the host's own zone is found via tzlocal.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

setup(
    name			= "chronon",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= list( package_dir.keys() ),
    package_dir			= package_dir,
    zip_safe			= False,
    author			= "Perry Kundert",
    author_email		= "perry@hardconsulting.com",
    description			= "Chronon represents Gregorian points in time, with UTC offsets and DST transitions",
    long_description		= long_description,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "chronon date time timezone DST gregorian calendar",
    classifiers			= classifiers,
)
