echo("<!DOCTYPE html>\n<html>\n<head>\n")
echo("<title>", this.esc(this.render_block("title")), " | ", this.esc(site_name), "</title>\n")
echo("</head>\n<body>\n")
echo(this.render("layouts/_nav", items=nav_items))
echo("<main>\n", this.render_block("content"), "</main>\n")
echo(this.render_block("sidebar"))
echo("<footer>Powered by trellis</footer>\n")
echo("</body>\n</html>\n")
