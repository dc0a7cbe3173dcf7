"""Sliding windows over a sentence sequence."""


def create_sliding_windows(sentences: list[str], window_size: int) -> list[str]:
    """
    Join every run of ``window_size`` consecutive sentences with a space.

    Windows slide by one sentence, so neighbors share ``window_size - 1``
    sentences. Fewer sentences than ``window_size`` gives no windows.
    """
    windows = []
    for i in range(len(sentences) - window_size + 1):
        windows.append(" ".join(sentences[i:i + window_size]))
    return windows
