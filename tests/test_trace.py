"""Tests for composition tracing."""

from builders import ComposeOptions, Fragment, SequenceBuilder, TextBuilder, Trace


def test_compose_records_each_combine() -> None:
    trace = Trace()
    builder = SequenceBuilder(trace=trace)

    builder.build(Fragment.Item(1), Fragment.Absent(), Fragment.Collection([2]))

    actions = [ev.action for ev in trace.get_events()]
    assert actions == ["compose_begin", "combine", "combine", "combine", "compose_end"]
    assert len(trace) == 5


def test_compose_end_reports_counts() -> None:
    trace = Trace()
    SequenceBuilder(trace=trace).build(Fragment.Item(1), Fragment.Absent(), Fragment.Collection([2]))

    [end] = trace.find_all("compose_end")
    assert end.info == {"fragments": 3, "size": 2}
    assert end.parent_id == 0


def test_find_all_by_info() -> None:
    trace = Trace()
    SequenceBuilder(trace=trace).build(Fragment.Item(1), Fragment.Absent(), Fragment.Item(2))

    absent = trace.find_all("combine", kind="absent")
    assert len(absent) == 1
    assert absent[0].info["index"] == 1


def test_begin_event_carries_label() -> None:
    trace = Trace()
    TextBuilder(ComposeOptions(label="greeting"), trace=trace).build(Fragment.Item("hi"))

    [begin] = trace.find_all("compose_begin")
    assert begin.info == {"builder": "greeting"}


def test_nested_blocks_attach_to_enclosing_compose() -> None:
    trace = Trace()
    builder = SequenceBuilder(trace=trace)

    def body():
        yield Fragment.Item(1)
        yield builder.either(True, Fragment.Item(2), Fragment.Item(3))

    assert builder.compose(body()) == [1, 2]

    tree = trace.as_tree()
    assert tree[None] == [0]
    assert tree[0] == [1, 2, 5, 6]
    assert tree[2] == [3, 4]
    assert trace.get_events()[2].action == "block_begin"


def test_options_can_create_trace() -> None:
    builder = SequenceBuilder(ComposeOptions(trace=True))
    assert builder.trace is not None

    builder.build(Fragment.Item(1))
    assert len(builder.trace) == 3


def test_no_trace_by_default() -> None:
    assert SequenceBuilder().trace is None


def test_disabled_trace_records_nothing() -> None:
    trace = Trace(enabled=False)
    result = SequenceBuilder(trace=trace).build(Fragment.Item(1))

    assert result == [1]
    assert len(trace) == 0
    assert trace.record("anything") is None


def test_push_pop_and_clear() -> None:
    trace = Trace()
    root = trace.record("root")
    assert root is not None
    trace.push(root)
    child = trace.record("child")
    assert trace.pop() == root
    assert trace.pop() is None

    assert trace.get_events()[child].parent_id == root

    trace.clear()
    assert len(trace) == 0
    assert trace.record("again") == 0
