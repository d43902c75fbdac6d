from md2html.cli import app

app(prog_name="md2html")
