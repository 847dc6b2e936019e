def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import annostrip.core.interfaces as I

    assert hasattr(I, "HighlighterProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "ModeCleanerProtocol")


def test_default_implementations_satisfy_protocols():
    import logging

    from annostrip.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol, ModeCleanerProtocol
    from annostrip.logging.factory import DefaultLoggerFactory
    from annostrip.processing.docstrip.latex_docstrip import LatexCleaner
    from annostrip.processing.docstrip.md_docstrip import MarkdownCleaner
    from annostrip.processing.docstrip.py_docstrip import PythonCleaner

    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(logging.getLogger("annostrip"), LoggerLikeProtocol)
    for cls in (LatexCleaner, PythonCleaner, MarkdownCleaner):
        assert isinstance(cls(), ModeCleanerProtocol)
