echo("Hello, ", this.esc(name), "!")
