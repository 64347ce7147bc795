from json_shape.observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook


class TestInMemoryMetricsHook:
    def test_counters_are_summed_per_labels(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment("hits")
        hook.increment("hits", 2)
        hook.increment("hits", labels={"format": "array"})

        assert hook.count("hits") == 3
        assert hook.count("hits", {"format": "array"}) == 1
        assert hook.count("misses") == 0

    def test_latencies_and_gauges_keep_samples(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_latency("duration", 1.5)
        hook.record_latency("duration", 2.5)
        hook.record_gauge("size", 10)

        assert hook.latencies["duration"] == [1.5, 2.5]
        assert hook.gauges["size"] == [10]


def test_noop_hook_accepts_everything() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency("x", 1.0, labels={"a": "b"})
    hook.increment("x")
    hook.record_gauge("x", 1.0)


def test_hooks_satisfy_protocol() -> None:
    assert isinstance(NoOpMetricsHook(), MetricsHook)
    assert isinstance(InMemoryMetricsHook(), MetricsHook)
    assert not isinstance(object(), MetricsHook)
