import logging
import threading

from .misc import change_function, mutexmethod, lazystr, log_cfg, timer

log				= logging.getLogger( __package__ )


def test_function_creation():
    """Creating functions with code containing a defined co_filename is required in
    order to extend the logging module.  Unfortunately, this module seeks up the
    stack frame until it finds a function whose co_filename is not the logging
    module...  """

    def func( boo ):
        pass

    assert func.__code__.co_filename == __file__
    filename			= "something/else.py"
    change_function( func, co_filename=filename )
    assert func.__code__.co_filename == filename


def test_mutexmethod():

    class C:
        _cls_lock		= threading.Lock()
        def __init__( self ):
            self._ins_lock	= threading.Lock()

        @classmethod
        @mutexmethod( '_cls_lock', blocking=False )
        def clsmethod_lock_cls( cls, f=None ):
            if f:
                return f()

        @mutexmethod( '_cls_lock', blocking=False )
        def insmethod_lock_cls( self, f=None ):
            if f:
                return f()

        @mutexmethod( '_ins_lock', blocking=False )
        def insmethod_lock_ins( self, f=None ):
            if f:
                return f()

    c				= C()

    # Same lock; should raise Exception (since blocking=False used above)
    assert c.insmethod_lock_cls() is None
    try:
        c.insmethod_lock_cls( c.insmethod_lock_cls )
        assert False, "Should have raised recursive lock exception"
    except RuntimeError as exc:
        assert "Lock is held" in str( exc )

    assert c.clsmethod_lock_cls() is None
    try:
        c.clsmethod_lock_cls( c.insmethod_lock_cls )
        assert False, "Should have raised recursive lock exception"
    except RuntimeError as exc:
        assert "Lock is held" in str( exc )

    # The failed attempts left the lock as they found it
    assert not C._cls_lock.locked()

    # Two different locks; should not interfere
    c.clsmethod_lock_cls( c.insmethod_lock_ins )
    assert C.insmethod_lock_ins.__name__ == "insmethod_lock_ins"


def test_logging_levels( caplog ):
    assert logging.WARNING > logging.NORMAL > logging.DETAIL > logging.INFO > logging.DEBUG > logging.TRACE
    assert logging.getLevelName( logging.DETAIL ) == 'DETAIL'
    # Levels are logged through Logger methods; the logging module itself gains no functions
    assert not any( hasattr( logging, name ) for name in ( 'normal', 'detail', 'trace' ))

    with caplog.at_level( logging.DETAIL, logger=__package__ ):
        log.normal( "Normal %d", 1 )
        log.detail( "Detail %d", 2 )
        log.trace( "Trace %d", 3 )
    assert [ ( r.levelname, r.getMessage() ) for r in caplog.records ] \
        == [ ( 'NORMAL', "Normal 1" ), ( 'DETAIL', "Detail 2" ) ]
    # The logging call site is found, not our logging extension
    assert caplog.records[0].funcName == "test_logging_levels"

    formatted			= logging.Formatter( log_cfg['format'], log_cfg['datefmt'] ).format( caplog.records[1] )
    assert "DETAIL" in formatted and formatted.endswith( "Detail 2" )


def test_lazystr():
    calls			= []
    def expensive():
        calls.append( 1 )
        return "expensive"

    lazy			= lazystr( expensive )
    log.trace( "Never formatted: %s", lazy )
    assert not calls
    assert str( lazy ) == "expensive"
    assert calls == [ 1 ]


def test_timer():
    assert timer() > 1.6e9
