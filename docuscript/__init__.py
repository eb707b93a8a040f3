"""docuscript - storyboard, transcript and narration tooling for documentary scripts."""

__version__ = "0.1.0"
