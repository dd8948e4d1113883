echo("<!DOCTYPE html>\n<html>\n<head><title>", this.esc(this.render_block("title")), " | ", this.esc(site_name), "</title></head>\n<body>\n")
echo("<header>", this.esc(site_name), "</header>\n")
echo(this.render_block("content"))
echo("<footer>", this.render_block("footer", "&copy; Bench"), "</footer>\n")
echo("</body>\n</html>\n")
