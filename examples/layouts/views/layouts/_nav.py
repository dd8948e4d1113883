echo("<nav>\n")
for item in items:
    echo('  <a href="', this.esc(item["url"]), '">', this.esc(item["label"]), "</a>\n")
echo("</nav>\n")
