import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import consolidate.core.interfaces as I

    assert hasattr(I, "PathMatcherProtocol")
    assert hasattr(I, "ContentFramerProtocol")
    assert hasattr(I, "OutputWriterProtocol")
    assert hasattr(I, "PresenterProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_default_components_satisfy_protocols(tmp_path):
    from consolidate.core.interfaces import (
        ContentFramerProtocol,
        OutputWriterProtocol,
        PathMatcherProtocol,
        PresenterProtocol,
    )
    from consolidate.discovery.path_matcher import PathMatcher
    from consolidate.io.writer import AtomicOutputWriter
    from consolidate.logging.factory import DefaultLoggerFactory
    from consolidate.core.interfaces import LoggerFactoryProtocol
    from consolidate.presentation import NullPresenter, RecordingPresenter, RichPresenter
    from consolidate.processing.framer import ContentFramer

    assert isinstance(PathMatcher(root=tmp_path), PathMatcherProtocol)
    assert isinstance(ContentFramer(tmp_path), ContentFramerProtocol)
    assert isinstance(AtomicOutputWriter(tmp_path), OutputWriterProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    for presenter in (NullPresenter(), RecordingPresenter(), RichPresenter()):
        assert isinstance(presenter, PresenterProtocol)


def test_public_surface():
    import consolidate

    for name in consolidate.__all__:
        assert hasattr(consolidate, name), name
    assert callable(consolidate.consolidate)
