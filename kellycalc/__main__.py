from kellycalc.cli import app

app(prog_name="kellycalc")
