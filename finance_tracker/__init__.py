"""Personal finance tracker: transactions, investments and their summaries."""
