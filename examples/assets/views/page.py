echo("<html>\n<head>\n")
echo('<link rel="stylesheet" href="', this.asset("css/app.css"), '">\n')
echo("<title>", this.esc(title), "</title>\n")
echo("</head>\n<body>\n")
echo("<h1>", this.esc(title), "</h1>\n")
echo('<script src="', this.asset("/js/app.js"), '"></script>\n')
echo("</body>\n</html>\n")
