from gong_mcp.main import main

main()
