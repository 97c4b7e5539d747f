"""Console banner content."""

BANNER_TEXT = """[bold green]restshell[/bold green]

[dim]Quick start:[/dim]
  1. go somewhere: [cyan]cq https://api.example.com/v1/[/cyan]
  2. look around:  [cyan]get users[/cyan]
  3. send data:    [cyan]load body.json[/cyan] then [cyan]post users[/cyan]
  4. dig in:       [cyan]sel .items[0].id[/cyan]

[dim]Find help fast:[/dim]
  [cyan]help topics[/cyan]    - List help topics
  [cyan]help requests[/cyan]  - Verbs, payloads and return codes
  [cyan]get --help[/cyan]     - Full help for a command

[dim]Built-in:[/dim]
  [cyan]exit[/cyan], [cyan]quit[/cyan], [cyan]q[/cyan] - Exit console
  [cyan]clear[/cyan], [cyan]cls[/cyan]     - Clear screen
  [cyan]files[/cyan]          - Show payload, output and header files
  [cyan]url[/cyan]            - Show the current URL

[dim]The prompt shows the last status code, the history position and the URL.
Tab completion and history (↑↓) are available.[/dim]
"""
