from transport_rag.mcp_server.server import main

main()
