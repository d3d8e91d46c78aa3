from scripts.export_theme import export_theme


def test_export_theme_writes_tailwind_config(tmp_path):
    output = tmp_path / "tailwind.config.js"

    path = export_theme(output)

    assert path == output
    text = output.read_text(encoding="utf-8")
    assert "module.exports = {" in text
    assert 'require("@tailwindcss/typography")' in text
