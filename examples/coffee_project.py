"""Generate a build.ninja compiling CoffeeScript sources into one bundle."""

from pathlib import Path

from ninjagen import escape, ninja_builder

SOURCES = ("src/app.coffee", "src/my views/list.coffee")


def generate(path: str | Path = "build.ninja") -> Path:
    ninja = ninja_builder("1.10", "build")
    ninja.header("# Generated by examples/coffee_project.py, do not edit.")

    ninja.rule("coffee").run("coffee -cs < $in > $out").description("COFFEE $out")
    ninja.rule("concat").run("cat $in > $out").description("CONCAT $out")
    ninja.rule("regen").run("python $in").generator(True)

    outputs = []
    for source in SOURCES:
        output = "build/" + source.removesuffix(".coffee") + ".js"
        ninja.edge(escape(output)).using("coffee").from_(escape(source))
        outputs.append(escape(output))

    ninja.edge("dist/bundle.js").using("concat").from_(outputs).after("build")
    ninja.edge("build.ninja").using("regen").from_("examples/coffee_project.py")
    ninja.edge("all").from_("dist/bundle.js")
    ninja.by_default("all")
    return ninja.save(path, only_if_changed=True)


if __name__ == "__main__":
    generate()
