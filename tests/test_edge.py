import pytest

from ninjagen import PHONY_RULE, EdgeBuilder, NinjaBuilder, StringSink, ValidationError


def _render_edge(edge: EdgeBuilder) -> str:
    sink = StringSink()
    edge.write(sink)
    return sink.getvalue()


def test_simple_phony_edge(ninja: NinjaBuilder) -> None:
    ninja.edge("simple_phony")

    assert ninja.render() == "build simple_phony: phony\n"


def test_multi_target_phony_edge(ninja: NinjaBuilder) -> None:
    ninja.edge(["phony1", "phony2"])

    assert ninja.render() == "build phony1 phony2: phony\n"


def test_edge_targets_are_copied_from_caller_list() -> None:
    targets = ["a"]
    edge = EdgeBuilder(targets)
    targets.append("b")

    assert edge.targets == ["a"]
    assert edge.rule == PHONY_RULE


def test_edge_rejects_empty_targets(ninja: NinjaBuilder) -> None:
    with pytest.raises(ValidationError) as excinfo:
        ninja.edge([])

    assert excinfo.value.code == "E_VALIDATION"
    assert ninja.edge_count == 0


def test_edge_using_rule(ninja: NinjaBuilder) -> None:
    ninja.edge("baobab.js").using("coffee")

    assert ninja.render() == "build baobab.js: coffee\n"


def test_edge_binds_variable(ninja: NinjaBuilder) -> None:
    ninja.edge("baobab.js").assign("foobar", 42)

    assert ninja.render() == "build baobab.js: phony\n  foobar = 42\n"


def test_edge_variables_keep_first_insertion_order_and_last_value() -> None:
    edge = EdgeBuilder("out").assign("b", 1).assign("a", 2).assign("b", 3)

    assert _render_edge(edge) == "build out: phony\n  b = 3\n  a = 2\n"


def test_edge_numeric_and_string_keys_are_the_same_variable() -> None:
    edge = EdgeBuilder("out").assign(1, "x").assign("1", "y")

    assert edge.assigns == {"1": "y"}


@pytest.mark.parametrize(
    ("method", "separator"),
    [("from_", " "), ("need", " | "), ("after", " || ")],
)
def test_edge_inputs_accumulate_across_calls(method: str, separator: str) -> None:
    edge = EdgeBuilder("dist")
    getattr(edge, method)("debug")
    getattr(edge, method)(["release", "lint"])

    assert _render_edge(edge) == f"build dist: phony{separator}debug release lint\n"


def test_edge_single_source(ninja: NinjaBuilder) -> None:
    ninja.edge("dist").from_("debug")

    assert ninja.render() == "build dist: phony debug\n"


def test_edge_several_requirements(ninja: NinjaBuilder) -> None:
    ninja.edge("dist").need(["debug", "release"])

    assert ninja.render() == "build dist: phony | debug release\n"


def test_edge_order_only_requirement(ninja: NinjaBuilder) -> None:
    ninja.edge("dist").after("debug")

    assert ninja.render() == "build dist: phony || debug\n"


def test_edge_empty_input_lists_render_like_untouched_ones() -> None:
    edge = EdgeBuilder("dist").from_([]).need([]).after([])

    assert edge.sources == []
    assert edge.dependencies == []
    assert edge.order_deps == []
    assert _render_edge(edge) == "build dist: phony\n"


def test_edge_full_line_with_variables_and_pool() -> None:
    edge = (
        EdgeBuilder(["main.o"])
        .using("cc")
        .from_("main.c")
        .need("config.h")
        .after("gen")
        .assign("cflags", "-O2")
        .pool("heavy")
    )

    assert _render_edge(edge) == (
        "build main.o: cc main.c | config.h || gen\n  cflags = -O2\n  pool = heavy\n"
    )


def test_edge_to_dict_omits_untouched_fields() -> None:
    edge = EdgeBuilder("dist").from_([])

    assert edge.to_dict() == {"targets": ["dist"], "rule": "phony", "sources": []}
