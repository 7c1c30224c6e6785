from _sexpformat.cli import app

app(prog_name="sexpformat")
