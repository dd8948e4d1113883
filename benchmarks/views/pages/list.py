echo("<table>\n")
for row in rows:
    echo("<tr><td>", row["id"], "</td><td>", this.esc(row["name"]), "</td><td>", this.esc(row["email"]), "</td></tr>\n")
echo("</table>\n")
