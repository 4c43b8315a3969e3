"""HTTP endpoints that do not forward to a provider."""