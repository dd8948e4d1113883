echo('<div class="comment"><b>', this.esc(comment["author"]), "</b> ", this.esc(comment["body"]), "</div>\n")
