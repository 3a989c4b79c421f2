#!/usr/bin/env python3
"""
Environment and Provider Diagnostics Script

This script prints the runtime configuration for the inference endpoint.
Use this to verify that:
1. The Ollama endpoint is reachable
2. The configured model is installed
3. All environment variables are correctly set

Usage:
    python scripts/inspect_env.py
"""

import asyncio
import os
import sys

# Add package to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def main():
    print("=" * 60)
    print("Resume ATS Analyzer Diagnostics")
    print("=" * 60)

    from resume_ats.core import settings
    from resume_ats.schemas.pydantic import InferenceConfig

    print("\n📋 ENVIRONMENT VARIABLES (from .env)")
    print("-" * 40)

    print("\n🤖 LLM Configuration:")
    print(f"  LL_MODEL:         {settings.LL_MODEL}")
    print(f"  LLM_BASE_URL:     {settings.LLM_BASE_URL}")
    print(f"  LLM_TEMPERATURE:  {settings.LLM_TEMPERATURE}")
    print(f"  LLM_NUM_CTX:      {settings.LLM_NUM_CTX}")
    print(f"  LLM_TIMEOUT_MS:   {settings.LLM_TIMEOUT_MS}")

    config = InferenceConfig.from_settings(settings)
    print(f"\n  Effective endpoint: {config.endpoint}/api/generate")

    print("\n✅ VALIDATION CHECKS")
    print("-" * 40)

    errors = []
    warnings = []

    if settings.LLM_TEMPERATURE > 0.5:
        print(f"⚠️  LLM_TEMPERATURE: {settings.LLM_TEMPERATURE} (high, JSON output may be unstable)")
        warnings.append(f"LLM_TEMPERATURE={settings.LLM_TEMPERATURE} is high, recommend 0.2")
    else:
        print(f"✅ LLM_TEMPERATURE: {settings.LLM_TEMPERATURE}")

    if settings.LLM_NUM_CTX < 2048:
        print(f"⚠️  LLM_NUM_CTX: {settings.LLM_NUM_CTX} (prompt may be cut off by the model)")
        warnings.append(f"LLM_NUM_CTX={settings.LLM_NUM_CTX} is low, recommend at least 2048")
    else:
        print(f"ℹ️  LLM_NUM_CTX: {settings.LLM_NUM_CTX}")

    print("\n🔧 ENDPOINT HEALTHCHECK")
    print("-" * 40)

    try:
        from resume_ats.agent.providers.ollama import OllamaProvider

        async def _check():
            provider = OllamaProvider(config=config)
            installed = await provider.installed_models()
            print(f"  Installed models: {', '.join(installed) or '(none)'}")
            await provider.healthcheck()

        asyncio.run(_check())
        print(f"✅ Model '{config.model}' is available")
    except Exception as e:
        print(f"❌ Healthcheck failed: {e}")
        errors.append(f"Ollama healthcheck failed: {e}")

    print("\n" + "=" * 60)
    if errors:
        print("❌ ERRORS FOUND:")
        for err in errors:
            print(f"   • {err}")
        print("\nFix these issues before running an analysis.")
        sys.exit(1)
    elif warnings:
        print("⚠️  WARNINGS (non-critical):")
        for warn in warnings:
            print(f"   • {warn}")
        print("\n✅ System should work, but consider addressing warnings.")
        sys.exit(0)
    else:
        print("✅ ALL CHECKS PASSED")
        sys.exit(0)


if __name__ == "__main__":
    main()
