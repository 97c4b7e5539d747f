"""Help topics for ConsoleApp."""

HELP_TOPICS: dict[str, str] = {
    "navigation": """[bold]Moving around[/bold]

  [cyan]cq <url>[/cyan]       works like cd: [cyan]cq users[/cyan], [cyan]cq ..[/cyan], [cyan]cq /v2/[/cyan]
  [cyan]cq //host[/cyan]      switch host, keep the protocol
  [cyan]cq https://h/p[/cyan] switch everything
  [cyan]cq ?page=2[/cyan]     append a query string
  [cyan]cq -[/cyan]           return to the previous URL
  [cyan]suffix .json[/cyan]   inserted after the path of every request
  [cyan]url[/cyan]            print the current URL""",
    "headers": """[bold]Headers and options[/bold]

  [cyan]header[/cyan]                   list headers
  [cyan]header X-Trace 1[/cyan]         set a header
  [cyan]header -d X-Trace[/cyan]        remove it
  [cyan]accept[/cyan], [cyan]authorization[/cyan], [cyan]content-type[/cyan], [cyan]cookie[/cyan]  shortcuts
  [cyan]basic-auth \\[user] \\[pass][/cyan] prompts for what is missing
  [cyan]ssl-insecure on|off[/cyan]      accept invalid certificates
  [cyan]cookie-jar on|off|FILE[/cyan]   keep cookies between requests
  [cyan]user-agent [-d] \\[agent][/cyan]  override the user agent""",
    "modes": """[bold]Content modes[/bold]

  [cyan]mode none|plain|json|xml[/cyan]
  [cyan]json[/cyan]  pretty printing and [cyan]sel[/cyan] through jq; payloads may be jq programs
        applied to the previous output
  [cyan]xml[/cyan]   pretty printing and XPath [cyan]sel[/cyan] through xmllint
  [cyan]plain[/cyan] [cyan]sel[/cyan] is a regular expression line match
  Missing tools are reported once and the mode degrades to plain output.""",
    "history": """[bold]Response history[/bold]

  [cyan]back \\[n][/cyan], [cyan]forward \\[n][/cyan]  step through earlier responses
  [cyan]first \\[n][/cyan], [cyan]last \\[n][/cyan]    jump to either end
  A new request while browsing back discards the later responses.""",
    "requests": """[bold]Requests[/bold]

  [cyan]get[/cyan], [cyan]head[/cyan], [cyan]options[/cyan], [cyan]delete[/cyan]  send the payload only with [cyan]-d[/cyan]
  [cyan]post[/cyan], [cyan]put[/cyan], [cyan]patch[/cyan]             send the payload unless [cyan]-n[/cyan]
  An optional URL applies to that request only: [cyan]get ../other[/cyan]
  [cyan]load FILE[/cyan] copies a file into the payload, [cyan]use FILE[/cyan] sends it in place.
  Return codes: the HTTP client's exit code, 22 for status >= 400, else 0.""",
}

HELP_TOPIC_ALIASES: dict[str, str] = {
    "url": "navigation",
    "cq": "navigation",
    "header": "headers",
    "options": "headers",
    "auth": "headers",
    "mode": "modes",
    "sel": "modes",
    "back": "history",
    "verbs": "requests",
    "payload": "requests",
}
