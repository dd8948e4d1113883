this.layout("layouts/section")
this.block("title", title)

this.begin_block("sidebar")
echo("<ul>")
for tag in tags:
    echo("<li>", this.esc(tag), "</li>")
echo("</ul>")
this.end_block()

echo("<h1>", this.esc(title), "</h1>\n")
for comment in comments:
    echo(this.render("partials/comment", comment=comment))
