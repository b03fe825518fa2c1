"""HTTP routers of the Get Favicon service"""
