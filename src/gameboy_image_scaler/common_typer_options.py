from typing import Annotated

import typer

LogLevelArg = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR)."),
]

WorkspaceAndScaleArgs = Annotated[
    list[str] | None,
    typer.Argument(
        help="Either nothing, or a workspace directory followed by a scale factor.",
        show_default=False,
    ),
]
