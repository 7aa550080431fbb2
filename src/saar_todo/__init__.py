"""saar-todo: a todo list served over MCP stdio."""
