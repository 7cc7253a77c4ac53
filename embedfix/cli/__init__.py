"""CLI entry point for embedfix."""

import rich_click as click

from .. import __version__

# Import command modules — avoid shadowing module names with command objects
# so that `import embedfix.cli.<module>` still resolves to the module.
from . import config_cmd as _config_mod
from . import rewrite as _rewrite_mod
from . import run as _run_mod


@click.group()
@click.version_option(version=__version__)
def cli():
    """Reply to Twitter/X status links with embed-friendly mirror links."""
    pass


# Register commands
cli.add_command(_run_mod.run)
cli.add_command(_rewrite_mod.rewrite)
cli.add_command(_rewrite_mod.check)
cli.add_command(_config_mod.config)


if __name__ == "__main__":
    cli()
