import asyncio
import uvicorn


async def start_servers():
    # Data tier
    config1 = uvicorn.Config(
        "data_service.app.main:app",
        host="0.0.0.0",
        port=8001,
        reload=False,
    )
    server1 = uvicorn.Server(config1)

    # Business tier (talks to the data tier over HTTP)
    config2 = uvicorn.Config(
        "business_service.app.main:app",
        host="0.0.0.0",
        port=8002,
        reload=False,
    )
    server2 = uvicorn.Server(config2)

    # Run both servers concurrently
    await asyncio.gather(
        server1.serve(),
        server2.serve(),
    )

if __name__ == "__main__":
    try:
        asyncio.run(start_servers())
    except KeyboardInterrupt:
        print("\nShutting down servers...")
