echo("<section>", this.esc(label))
# Closes a block that was never begun
this.end_block()
echo("</section>")
