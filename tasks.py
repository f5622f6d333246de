import invoke


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=narigama_optional --cov-report=xml:coverage.xml")


@invoke.task()
def test_debug(ctx: invoke.Context):
    # same suite, with the package logger switched on
    ctx.run("pytest -s", env={"NARIGAMA_OPTIONAL_DEBUG": "true"})
