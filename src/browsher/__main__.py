from browsher.cli import cli

cli()
