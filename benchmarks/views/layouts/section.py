this.layout("layouts/base")
echo('<div class="section">\n<aside>', this.render_block("sidebar"), "</aside>\n")
echo("<main>", this.render_block("content"), "</main>\n</div>\n")
