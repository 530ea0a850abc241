from version_exporter.command import app

app(prog_name="version-exporter")
