this.layout("layouts/main")
this.block("title", title)

this.begin_block("sidebar")
echo('<aside>Contact: <a href="mailto:team@example.com">team@example.com</a></aside>\n')
this.end_block()

echo("<h1>", this.esc(title), "</h1>\n")
echo("<p>", this.esc(description), "</p>\n")
