from content_checker.cli import app

app(prog_name="content-checker")
