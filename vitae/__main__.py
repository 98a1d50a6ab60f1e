from vitae.cli import app

app(prog_name="vitae")
