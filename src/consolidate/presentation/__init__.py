from consolidate.presentation.recording import NullPresenter, RecordingPresenter
from consolidate.presentation.rich_presenter import RichPresenter, format_summary

__all__ = ['NullPresenter', 'RecordingPresenter', 'RichPresenter', 'format_summary']
