this.layout("layouts/main")
this.block("title", title)

echo("<h1>", this.esc(title), "</h1>\n")
echo("<p>", this.esc(message), "</p>\n")
