"""Provider clients and the gateway that selects between them."""
