echo("<h1>Dashboard</h1>")
echo(this.render("partials/widget", label="Sales"))
