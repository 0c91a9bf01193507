"""Statement syntax tree, query intents and semantic analysis."""