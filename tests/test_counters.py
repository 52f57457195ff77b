from promptdirector.core.counters import CounterTracker, MarkerKind, iter_markers


def test_scan_keeps_maximum_not_last_seen() -> None:
    """
    Test that the source counter becomes the maximum index, not the last or the sum.
    """
    tracker = CounterTracker()
    tracker.scan("Source Context 3: a\nSource Context 7: b\nSource Context 2: c")
    assert tracker.last_source_index == 7
    assert tracker.last_prompt_index == 0


def test_scan_without_markers_leaves_counters() -> None:
    """
    Test that text without markers does not change the counters.
    """
    tracker = CounterTracker(last_source_index=4, last_prompt_index=9)
    tracker.scan("No numbered output here. Prompt: missing number.")
    assert tracker.snapshot() == (4, 9)


def test_scan_never_lowers_counters() -> None:
    """
    Test that lower indices in a later reply do not decrease the counters.
    """
    tracker = CounterTracker()
    tracker.scan("Source Context 10:\nPrompt 12:")
    tracker.scan("Source Context 1:\nPrompt 2:")
    assert tracker.snapshot() == (10, 12)


def test_scan_is_case_insensitive() -> None:
    """
    Test that markers match regardless of case.
    """
    tracker = CounterTracker()
    tracker.scan("source context 5: x\nPROMPT 6: y")
    assert tracker.snapshot() == (5, 6)


def test_scan_ignores_non_text_input() -> None:
    """
    Test that None or empty input is a no-op rather than an error.
    """
    tracker = CounterTracker(last_source_index=1, last_prompt_index=1)
    tracker.scan(None)  # type: ignore[arg-type]
    tracker.scan("")
    assert tracker.snapshot() == (1, 1)


def test_iter_markers_yields_kinds_in_order() -> None:
    """
    Test that iter_markers yields source markers first, then prompt markers.
    """
    text = "Source Context 1: a\nPrompt 1: p\nSource Context 2: b\nPrompt 2: q"
    assert list(iter_markers(text)) == [
        (MarkerKind.SOURCE_CONTEXT, 1),
        (MarkerKind.SOURCE_CONTEXT, 2),
        (MarkerKind.PROMPT, 1),
        (MarkerKind.PROMPT, 2),
    ]


def test_iter_markers_requires_colon_and_digits() -> None:
    """
    Test that malformed markers are skipped.
    """
    text = "Source Context x: a\nPrompt 3 missing colon\nSource Context 4 : spaced"
    assert list(iter_markers(text)) == []


def test_reset_zeroes_counters() -> None:
    """
    Test that reset returns both counters to zero.
    """
    tracker = CounterTracker(last_source_index=8, last_prompt_index=3)
    tracker.reset()
    assert tracker.snapshot() == (0, 0)
