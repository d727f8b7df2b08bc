from dockcli.UTILS.console_logger import ConsoleLogger

def test_info_formats_params(capsys):
    ConsoleLogger().info("Successfully created network %s", "nginx-network")
    assert capsys.readouterr().out == "Successfully created network nginx-network\n"

def test_warn_without_params(capsys):
    ConsoleLogger().warn("Image already exists skipping")
    assert capsys.readouterr().out == "Image already exists skipping\n"

def test_error_goes_to_stderr(capsys):
    ConsoleLogger().error("Error parsing compose file: %s", "bad yaml")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error parsing compose file: bad yaml\n"

def test_forced_colors(capsys):
    ConsoleLogger(color=True).info("started %s", "nginx")
    out = capsys.readouterr().out
    assert "\x1b[32m" in out
    assert "\x1b[34mnginx" in out
