"""Session state shared by the console loop and the command dispatcher."""
